# scenedeps/loading/buffer.py
from __future__ import annotations

import logging
from types import TracebackType
from typing import Callable, Optional, Type

from scenedeps.loading.binary import decode_text, is_gltf_binary
from scenedeps.loading.filesystem import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


class BufferLoader:
    """
    Reads a resolved buffer path synchronously.
    The whole file is read on construction.
    """

    def __init__(
        self,
        path: str,
        filesystem: Optional[FileSystem] = None,
        sniffer: Callable[[bytes], bool] = is_gltf_binary,
    ) -> None:
        self.path = path
        self._sniffer = sniffer
        self._data: Optional[bytes] = None
        self._error: Optional[str] = None
        self._disposed = False

        fs = filesystem or LocalFileSystem()
        try:
            if fs.exists(path):
                self._data = fs.read_bytes(path)
        except OSError as e:
            logger.debug("Reading %s failed: %s", path, e)

        if self._data is None:
            self._error = f"Cannot find resource at path {path}"
            logger.warning(self._error)
        else:
            logger.debug("Loaded %d bytes from %s", len(self._data), path)

    @property
    def success(self) -> bool:
        return self._data is not None

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def data(self) -> Optional[bytes]:
        return self._data

    @property
    def text(self) -> Optional[str]:
        if self._data is None:
            return None
        return decode_text(self._data)

    @property
    def is_binary(self) -> Optional[bool]:
        if self._data is None:
            return None
        return self._sniffer(self._data)

    def dispose(self) -> None:
        self._data = None
        self._disposed = True

    def __enter__(self) -> BufferLoader:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return f"BufferLoader(path={self.path!r}, success={self.success})"
