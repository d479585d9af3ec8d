# dropbox_client.py - builds authenticated Dropbox API requests and sends them through a transport
from typing import Dict, NamedTuple, Optional, Union

from api_client import HttpClient
from dropbox_request import ENDPOINT_CONTENT, DropboxRequest
from dropbox_response import DropboxResponse
from utils.payload_loader import dump_payload, get_logger

logger = get_logger("dropbox-sdk")

BASE_PATH = "https://api.dropboxapi.com/2"
CONTENT_PATH = "https://content.dropboxapi.com/2"

# content endpoints take call arguments here, the body being the raw file
API_ARG_HEADER = "Dropbox-API-Arg"
OCTET_STREAM = "application/octet-stream"


class PreparedRequest(NamedTuple):
    url: str
    headers: Dict[str, str]
    body: Optional[Union[bytes, str]]


class DropboxClient:
    """Turns a DropboxRequest into one HTTP call.

    Holds nothing but the transport, so one instance can be shared by
    concurrent callers if the transport allows it. Non-2xx replies are
    returned like any other; transport errors propagate unchanged.
    """

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    @property
    def base_path(self) -> str:
        return BASE_PATH

    @property
    def content_path(self) -> str:
        return CONTENT_PATH

    def build_auth_header(self, access_token: str = "") -> Dict[str, str]:
        return {"Authorization": f"Bearer {access_token}"}

    def build_content_type_header(self, content_type: str = "") -> Dict[str, str]:
        return {"Content-Type": content_type}

    def build_url(self, endpoint: str = "", endpoint_type: str = "api") -> str:
        base = self.content_path if endpoint_type == ENDPOINT_CONTENT else self.base_path
        return base + endpoint

    def prepare_request(self, request: DropboxRequest) -> PreparedRequest:
        """Return (url, headers, body) for request; request itself is left as-is."""
        url = self.build_url(request.endpoint, request.endpoint_type)

        if request.has_file:
            extra = {API_ARG_HEADER: dump_payload(request.params)}
            content_type = OCTET_STREAM
            body = request.file.get_contents()
        else:
            extra = {}
            content_type = request.content_type
            body = dump_payload(request.params)

        headers = {
            **self.build_auth_header(request.access_token),
            **self.build_content_type_header(content_type),
            **request.headers,
            # upload arguments always come from params
            **extra,
        }
        return PreparedRequest(url, headers, body)

    def send_request(self, request: DropboxRequest) -> DropboxResponse:
        method = request.method
        url, headers, body = self.prepare_request(request)

        logger.debug("Sending %s %s", method, url)
        raw = self.http_client.send(url, method, body, headers)
        logger.debug("%s %s returned %s", method, url, raw.status_code)

        return DropboxResponse(
            request=request,
            body=raw.body,
            status_code=raw.status_code,
            headers=raw.headers,
        )
