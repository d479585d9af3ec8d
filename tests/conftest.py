import pytest

from api_client import RawResponse
from dropbox_client import DropboxClient


class RecordingHttpClient:
    """Stands in for the network: remembers every call, replays a canned reply."""

    def __init__(self, response=None, error=None):
        self.response = response or RawResponse(body=b"{}", status_code=200, headers={})
        self.error = error
        self.calls = []

    def send(self, url, method, body, headers):
        self.calls.append({"url": url, "method": method, "body": body, "headers": dict(headers)})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def transport():
    return RecordingHttpClient()


@pytest.fixture
def client(transport):
    return DropboxClient(transport)
