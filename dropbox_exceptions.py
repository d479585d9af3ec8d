# dropbox_exceptions.py - error types raised by the SDK


class DropboxClientError(Exception):
    """Base error: transport failures, unreadable payloads, undecodable bodies."""


class DropboxResponseError(DropboxClientError):
    """Raised by DropboxResponse.raise_for_status() for a non-2xx reply."""

    def __init__(self, response):
        self.response = response
        self.status_code = response.status_code
        self.body = response.body
        text = self.body.decode("utf-8", errors="replace") if isinstance(self.body, bytes) else str(self.body)
        super().__init__(f"Dropbox API returned {self.status_code}: {text}")
