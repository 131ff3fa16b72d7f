from pathlib import Path
from typing import Dict

import pytest

from scenedeps.dependencies.types import AssetDependency, DependencyKind
from scenedeps.loading.textures import ImportedTextureRegistry, TextureData


class MemoryFileSystem:
    """In-memory stand-in for the local filesystem."""

    def __init__(self, files: Dict[str, bytes] | None = None) -> None:
        self.files = dict(files or {})
        self.reads: list[str] = []

    def exists(self, path) -> bool:
        return str(path) in self.files

    def read_bytes(self, path) -> bytes:
        self.reads.append(str(path))
        try:
            return self.files[str(path)]
        except KeyError:
            raise FileNotFoundError(path)


@pytest.fixture
def memory_fs():
    return MemoryFileSystem()


@pytest.fixture
def texture():
    return TextureData(data=b"\xff" * 16, width=2, height=2, components=4)


@pytest.fixture
def registry(texture):
    registry = ImportedTextureRegistry()
    registry.register("Textures/tex.png", texture)
    return registry


@pytest.fixture
def previous():
    return (
        AssetDependency(
            original_uri="tex.png",
            asset_path="Textures/tex.png",
            kind=DependencyKind.TEXTURE,
        ),
        AssetDependency(
            original_uri="scene.bin",
            asset_path="Buffers/scene.bin",
            kind=DependencyKind.BUFFER,
        ),
    )


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root
