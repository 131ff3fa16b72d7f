# scenedeps/loading/__init__.py
from scenedeps.loading.binary import GLB_MAGIC, decode_text, is_gltf_binary
from scenedeps.loading.buffer import BufferLoader
from scenedeps.loading.download import (
    BufferDownload,
    Download,
    DownloadTaskError,
    TextureDownload,
)
from scenedeps.loading.filesystem import FileSystem, LocalFileSystem
from scenedeps.loading.http import (
    HttpBufferDownload,
    HttpDownloadProvider,
    HttpTextureDownload,
)
from scenedeps.loading.task import DownloadTask, load_all
from scenedeps.loading.texture import TextureLoader
from scenedeps.loading.textures import (
    ImportedTextureRegistry,
    TextureData,
    TextureImporter,
    TextureRegistry,
)

__all__ = [
    "GLB_MAGIC",
    "is_gltf_binary",
    "decode_text",
    "Download",
    "BufferDownload",
    "TextureDownload",
    "DownloadTaskError",
    "FileSystem",
    "LocalFileSystem",
    "BufferLoader",
    "TextureLoader",
    "TextureData",
    "TextureImporter",
    "TextureRegistry",
    "ImportedTextureRegistry",
    "DownloadTask",
    "load_all",
    "HttpDownloadProvider",
    "HttpBufferDownload",
    "HttpTextureDownload",
]
