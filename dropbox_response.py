# dropbox_response.py - raw HTTP reply paired with the request that produced it
from dataclasses import dataclass, field
from typing import Any, Mapping

from dropbox_exceptions import DropboxClientError, DropboxResponseError
from dropbox_request import DropboxRequest
from utils.payload_loader import load_payload

API_RESULT_HEADER = "Dropbox-API-Result"


@dataclass(frozen=True)
class DropboxResponse:
    """What the transport returned, untouched.

    Nothing is decoded at construction. json() and api_result() parse on
    demand, and a non-2xx status only raises if the caller asks for it via
    raise_for_status().
    """

    request: DropboxRequest
    body: bytes
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        try:
            return load_payload(self.body)
        except ValueError as exc:
            raise DropboxClientError(f"Response body is not valid JSON: {exc}") from exc

    def get_header(self, name, default=None):
        # header names are case-insensitive on the wire
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default

    def api_result(self) -> Any:
        """Metadata a content endpoint returns alongside the file bytes."""
        raw = self.get_header(API_RESULT_HEADER)
        if raw is None:
            return {}
        try:
            return load_payload(raw)
        except ValueError as exc:
            raise DropboxClientError(f"{API_RESULT_HEADER} is not valid JSON: {exc}") from exc

    def raise_for_status(self):
        if not self.ok:
            raise DropboxResponseError(self)
        return self
