# scenedeps/__init__.py
from scenedeps.dependencies import (
    AssetDependency,
    DependencyCache,
    DependencyKind,
    load_dependencies,
    save_dependencies,
)
from scenedeps.loading import (
    BufferLoader,
    DownloadTask,
    DownloadTaskError,
    HttpDownloadProvider,
    ImportedTextureRegistry,
    LocalFileSystem,
    TextureLoader,
    load_all,
)
from scenedeps.log import get_logger, setup_logging
from scenedeps.provider import ResolvingDownloadProvider
from scenedeps.settings import ImportSettings

__version__ = "0.1.0"

__all__ = [
    "AssetDependency",
    "DependencyKind",
    "DependencyCache",
    "load_dependencies",
    "save_dependencies",
    "BufferLoader",
    "TextureLoader",
    "DownloadTask",
    "DownloadTaskError",
    "load_all",
    "HttpDownloadProvider",
    "ImportedTextureRegistry",
    "LocalFileSystem",
    "ResolvingDownloadProvider",
    "ImportSettings",
    "setup_logging",
    "get_logger",
]
