# scenedeps/loading/textures.py
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from PIL import Image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextureData:
    """Decoded texture pixels and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # always 4 (RGBA) once imported


class TextureRegistry(Protocol):
    def load_texture(self, path: str) -> Optional[Any]:
        """Texture imported at `path`, or None if there is none."""
        ...


class TextureImporter:
    """Decodes image files into RGBA `TextureData`."""

    def import_file(self, path: Path) -> TextureData:
        with Image.open(path) as img:
            return self._convert(img)

    def import_bytes(self, data: bytes) -> TextureData:
        with Image.open(io.BytesIO(data)) as img:
            return self._convert(img)

    def _convert(self, img: Image.Image) -> TextureData:
        converted = img.convert("RGBA")
        width, height = converted.size
        return TextureData(
            data=converted.tobytes(), width=width, height=height, components=4
        )


class ImportedTextureRegistry:
    """
    Textures the host has already imported, keyed by asset path.
    """

    def __init__(self, importer: Optional[TextureImporter] = None) -> None:
        self._textures: Dict[str, Any] = {}
        self._importer = importer or TextureImporter()

    def register(self, path: str, texture: Any) -> None:
        self._textures[path] = texture

    def unregister(self, path: str) -> None:
        self._textures.pop(path, None)

    def load_texture(self, path: str) -> Optional[Any]:
        return self._textures.get(path)

    def import_file(
        self, file: Union[str, Path], asset_path: Optional[str] = None
    ) -> TextureData:
        """Decode an image file and register it under `asset_path`."""
        file = Path(file)
        texture = self._importer.import_file(file)
        key = asset_path if asset_path is not None else file.as_posix()
        self.register(key, texture)
        logger.debug(
            "Imported texture %s (%dx%d)", key, texture.width, texture.height
        )
        return texture

    def __contains__(self, path: str) -> bool:
        return path in self._textures

    def __len__(self) -> int:
        return len(self._textures)

    def clear(self) -> None:
        self._textures.clear()
