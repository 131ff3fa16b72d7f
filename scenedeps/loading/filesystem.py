# scenedeps/loading/filesystem.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Union

PathLike = Union[str, Path]


class FileSystem(Protocol):
    def exists(self, path: PathLike) -> bool: ...

    def read_bytes(self, path: PathLike) -> bytes: ...


class LocalFileSystem:
    """
    Reads files from disk. Relative paths are taken relative to `root`
    (the project root) when one is given.
    """

    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = root

    def _full_path(self, path: PathLike) -> Path:
        p = Path(path)
        if self.root is not None and not p.is_absolute():
            return self.root / p
        return p

    def exists(self, path: PathLike) -> bool:
        return self._full_path(path).is_file()

    def read_bytes(self, path: PathLike) -> bytes:
        return self._full_path(path).read_bytes()
