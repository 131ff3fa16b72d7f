# scenedeps/loading/download.py
from __future__ import annotations

from types import TracebackType
from typing import Any, Optional, Protocol, Type, runtime_checkable


class DownloadTaskError(RuntimeError):
    """A download task was driven in a way it does not support."""


@runtime_checkable
class Download(Protocol):
    """
    Result of a resource request.
    Failures are reported through `success` and `error`, never raised.
    """

    @property
    def success(self) -> bool: ...

    @property
    def error(self) -> Optional[str]: ...

    @property
    def disposed(self) -> bool: ...

    def dispose(self) -> None: ...

    def __enter__(self) -> Any: ...

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None: ...


@runtime_checkable
class BufferDownload(Download, Protocol):
    @property
    def data(self) -> Optional[bytes]: ...

    @property
    def text(self) -> Optional[str]: ...

    @property
    def is_binary(self) -> Optional[bool]: ...


@runtime_checkable
class TextureDownload(Download, Protocol):
    @property
    def texture(self) -> Optional[Any]: ...

    @property
    def non_readable(self) -> bool: ...
