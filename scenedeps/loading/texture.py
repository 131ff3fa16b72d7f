# scenedeps/loading/texture.py
from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Optional, Type

from scenedeps.loading.textures import TextureRegistry

logger = logging.getLogger(__name__)


class TextureLoader:
    """
    Looks up a texture the host has already imported at a resolved path.

    Raw bytes are never read: scene textures are expected to exist as assets
    with their own import settings. `non_readable` is carried through for the
    consumer and has no effect on the lookup.
    """

    def __init__(
        self, path: str, non_readable: bool, registry: TextureRegistry
    ) -> None:
        self.path = path
        self._non_readable = non_readable
        self._error: Optional[str] = None
        self._disposed = False
        self._texture: Optional[Any] = registry.load_texture(path)

        if self._texture is None:
            self._error = f"Couldn't load texture at {path}"
            logger.warning(self._error)

    @property
    def success(self) -> bool:
        return self._texture is not None

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def texture(self) -> Optional[Any]:
        return self._texture

    @property
    def non_readable(self) -> bool:
        return self._non_readable

    def dispose(self) -> None:
        self._texture = None
        self._disposed = True

    def __enter__(self) -> TextureLoader:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return f"TextureLoader(path={self.path!r}, success={self.success})"
