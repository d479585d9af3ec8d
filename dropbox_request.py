# dropbox_request.py - description of one outgoing Dropbox API call
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from dropbox_file import DropboxFile

ENDPOINT_API = "api"
ENDPOINT_CONTENT = "content"

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class DropboxRequest:
    """A single API call: who, where, what.

    Instances are not modified after construction; use with_headers() /
    with_params() to derive a variant.
    """

    access_token: str
    method: str = "POST"
    endpoint: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    endpoint_type: str = ENDPOINT_API
    file: Optional[DropboxFile] = None
    content_type: str = JSON_CONTENT_TYPE

    def __post_init__(self):
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "params", dict(self.params or {}))
        object.__setattr__(self, "headers", dict(self.headers or {}))

    @property
    def has_file(self) -> bool:
        return self.file is not None

    def with_headers(self, headers: Mapping[str, str]) -> "DropboxRequest":
        merged: Dict[str, str] = {**self.headers, **headers}
        return replace(self, headers=merged)

    def with_params(self, params: Mapping[str, Any]) -> "DropboxRequest":
        return replace(self, params={**self.params, **params})
