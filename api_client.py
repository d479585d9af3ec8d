# api_client.py - HTTP transport for the Dropbox client, a thin wrapper around requests
import os
from dataclasses import dataclass, field
from typing import Mapping, Protocol, Union

import requests

from dropbox_exceptions import DropboxClientError
from utils.payload_loader import get_logger

logger = get_logger("dropbox-sdk.transport")


def env_timeout(name="DROPBOX_TIMEOUT", default=30.0):
    """Timeout in seconds from the environment; a bad value falls back to default."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %ss", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %ss", name, raw, default)
        return default
    return value


DEFAULT_TIMEOUT = env_timeout()


@dataclass(frozen=True)
class RawResponse:
    body: bytes
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)


class HttpClient(Protocol):
    """Anything that can put one request on the wire and hand back the reply."""

    def send(self, url: str, method: str, body: Union[bytes, str, None],
             headers: Mapping[str, str]) -> RawResponse:
        ...


class APIClient:
    """Default transport: one pooled requests.Session, fixed timeout.

    Status codes are returned as-is; only network-level failures raise.
    """

    def __init__(self, timeout=DEFAULT_TIMEOUT, session=None):
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, url, method, body, headers):
        try:
            resp = self.session.request(method, url, data=body, headers=dict(headers), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise DropboxClientError(f"{method} {url} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return RawResponse(body=resp.content, status_code=resp.status_code, headers=dict(resp.headers))

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
