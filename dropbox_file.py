# dropbox_file.py - a local file (or open binary stream) to be uploaded
import os
from typing import BinaryIO, Optional, Union

from dropbox_exceptions import DropboxClientError


class DropboxFile:
    """Upload payload backed by a path or an already open binary stream.

    Paths are opened in ``rb`` mode for each read and closed right after.
    ``offset`` and ``max_length`` select a slice of the source; -1 means
    "from the stream's position at construction" and "to the end"
    respectively. Every read starts from the same place.
    """

    def __init__(self, file_path_or_stream: Union[str, os.PathLike, BinaryIO],
                 max_length: int = -1, offset: int = -1):
        if isinstance(file_path_or_stream, (str, os.PathLike)):
            self.path: Optional[str] = os.fspath(file_path_or_stream)
            self.stream: Optional[BinaryIO] = None
        else:
            self.path = getattr(file_path_or_stream, "name", None)
            if not isinstance(self.path, str):
                self.path = None
            self.stream = file_path_or_stream
        self.max_length = max_length
        self.offset = offset
        # every read starts here, so the same file can be sent more than once
        self._start = offset if offset >= 0 else self._tell()

    @classmethod
    def create_by_path(cls, path, max_length=-1, offset=-1):
        return cls(path, max_length=max_length, offset=offset)

    @classmethod
    def create_by_stream(cls, name, stream, max_length=-1, offset=-1):
        dbx_file = cls(stream, max_length=max_length, offset=offset)
        dbx_file.path = name
        return dbx_file

    def _tell(self):
        if self.stream is None:
            return 0
        try:
            return self.stream.tell()
        except OSError:
            # not seekable: read from wherever it is
            return None

    def _read(self, stream) -> bytes:
        if self._start is not None:
            stream.seek(self._start)
        if self.max_length >= 0:
            return stream.read(self.max_length)
        return stream.read()

    def get_contents(self) -> bytes:
        if self.stream is not None:
            return self._read(self.stream)
        try:
            with open(self.path, "rb") as fh:
                return self._read(fh)
        except OSError as exc:
            raise DropboxClientError(f"Failed to read file {self.path}: {exc}") from exc

    def get_file_path(self):
        return self.path

    def get_file_name(self):
        return os.path.basename(self.path) if self.path else None

    def get_size(self):
        if self.stream is None:
            try:
                return os.path.getsize(self.path)
            except OSError as exc:
                raise DropboxClientError(f"Failed to stat file {self.path}: {exc}") from exc
        pos = self.stream.tell()
        self.stream.seek(0, os.SEEK_END)
        size = self.stream.tell()
        self.stream.seek(pos)
        return size

    def close(self):
        # paths are opened per read; caller streams are the caller's to close
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
