import pytest
import requests

from api_client import APIClient, RawResponse, env_timeout
from dropbox_exceptions import DropboxClientError


def _fake_response(status, content, headers=None):
    resp = requests.Response()
    resp.status_code = status
    resp._content = content
    resp.headers.update(headers or {})
    return resp


def test_send_passes_everything_to_session(monkeypatch):
    seen = {}

    def fake_request(self, method, url, data=None, headers=None, timeout=None):
        seen.update(method=method, url=url, data=data, headers=headers, timeout=timeout)
        return _fake_response(409, b'{"error": {}}', {"Content-Type": "application/json"})

    monkeypatch.setattr(requests.Session, "request", fake_request)

    with APIClient(timeout=5) as transport:
        raw = transport.send("https://api.dropboxapi.com/2/x", "POST", "{}", {"Authorization": "Bearer T"})

    assert seen == {
        "method": "POST",
        "url": "https://api.dropboxapi.com/2/x",
        "data": "{}",
        "headers": {"Authorization": "Bearer T"},
        "timeout": 5,
    }
    assert isinstance(raw, RawResponse)
    assert raw.status_code == 409
    assert raw.body == b'{"error": {}}'
    assert raw.headers["Content-Type"] == "application/json"


def test_connection_error_becomes_client_error(monkeypatch):
    def fake_request(self, *args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests.Session, "request", fake_request)

    with pytest.raises(DropboxClientError) as excinfo:
        APIClient().send("https://api.dropboxapi.com/2/x", "POST", "{}", {})
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_env_timeout_parses_value(monkeypatch):
    monkeypatch.setenv("DROPBOX_TIMEOUT", "12.5")
    assert env_timeout() == 12.5


@pytest.mark.parametrize("raw", ["abc", "-1", "0", ""])
def test_env_timeout_falls_back_on_bad_value(monkeypatch, raw):
    monkeypatch.setenv("DROPBOX_TIMEOUT", raw)
    assert env_timeout(default=30.0) == 30.0


def test_env_timeout_unset(monkeypatch):
    monkeypatch.delenv("DROPBOX_TIMEOUT", raising=False)
    assert env_timeout(default=7.0) == 7.0
