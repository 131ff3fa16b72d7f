# scenedeps/provider.py
from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import Iterable, Optional, Tuple, Union

from scenedeps.dependencies.cache import DependencyCache
from scenedeps.dependencies.types import AssetDependency, DependencyKind
from scenedeps.loading.buffer import BufferLoader
from scenedeps.loading.filesystem import FileSystem, LocalFileSystem
from scenedeps.loading.texture import TextureLoader
from scenedeps.loading.textures import ImportedTextureRegistry, TextureRegistry
from scenedeps.settings import ImportSettings

logger = logging.getLogger(__name__)


class ResolvingDownloadProvider:
    """
    Serves resource requests during an import by resolving each URI through
    a `DependencyCache` and loading the result synchronously from the
    filesystem or the imported-texture registry.

    The async `request*` methods exist so this provider can stand in for the
    runtime one; they complete without suspending.
    """

    def __init__(
        self,
        previous: Optional[Iterable[AssetDependency]] = None,
        *,
        filesystem: Optional[FileSystem] = None,
        registry: Optional[TextureRegistry] = None,
        settings: Optional[ImportSettings] = None,
    ) -> None:
        self.settings = settings or ImportSettings()
        self.cache = DependencyCache(previous)
        self.filesystem = filesystem or LocalFileSystem(
            self.settings.project_root
        )
        self.registry = registry or ImportedTextureRegistry()

    @property
    def dependencies(self) -> Tuple[AssetDependency, ...]:
        return self.cache.dependencies

    def load_buffer(self, uri: object) -> BufferLoader:
        path = self.cache.resolve(uri, DependencyKind.BUFFER)
        return BufferLoader(path, self.filesystem)

    def load_texture(
        self, uri: object, non_readable: bool = False
    ) -> TextureLoader:
        path = self.cache.resolve(uri, DependencyKind.TEXTURE)
        return TextureLoader(path, non_readable, self.registry)

    async def request(self, uri: object) -> BufferLoader:
        return self.load_buffer(uri)

    async def request_texture(
        self, uri: object, non_readable: bool = False
    ) -> TextureLoader:
        return self.load_texture(uri, non_readable)

    def make_project_relative(self, path: Union[str, PurePath]) -> str:
        """
        Express an absolute path below the project root relative to it, with
        forward slashes. Anything else is returned unchanged.
        """
        p = Path(path)
        if not p.is_absolute():
            return str(path)
        try:
            return p.relative_to(self.settings.project_root).as_posix()
        except ValueError:
            logger.debug("%s is outside the project root", p)
            return str(path)
