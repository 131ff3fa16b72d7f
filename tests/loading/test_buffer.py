import struct

from scenedeps.loading.buffer import BufferLoader
from scenedeps.loading.download import BufferDownload
from scenedeps.loading.filesystem import LocalFileSystem

GLB_HEADER = b"glTF" + struct.pack("<II", 2, 12)


def test_buffer_loader_reads_file(tmp_path):
    f = tmp_path / "scene.gltf"
    f.write_text('{"asset": {"version": "2.0"}}', encoding="utf-8")

    loader = BufferLoader(str(f))

    assert loader.success
    assert loader.error is None
    assert loader.text == '{"asset": {"version": "2.0"}}'
    assert loader.is_binary is False
    assert isinstance(loader, BufferDownload)


def test_buffer_loader_detects_binary_container(memory_fs):
    memory_fs.files["scene.glb"] = GLB_HEADER

    loader = BufferLoader("scene.glb", memory_fs)

    assert loader.is_binary is True
    assert loader.data == GLB_HEADER


def test_buffer_loader_missing_path(tmp_path):
    path = str(tmp_path / "nope.bin")

    loader = BufferLoader(path)

    assert not loader.success
    assert path in loader.error
    assert loader.error == f"Cannot find resource at path {path}"
    assert loader.data is None
    assert loader.text is None
    assert loader.is_binary is None


def test_buffer_loader_empty_file_is_success(memory_fs):
    memory_fs.files["empty.bin"] = b""

    loader = BufferLoader("empty.bin", memory_fs)

    assert loader.success
    assert loader.is_binary is False


def test_buffer_loader_read_error_is_failure():
    class BrokenFileSystem:
        def exists(self, path):
            return True

        def read_bytes(self, path):
            raise PermissionError(path)

    loader = BufferLoader("locked.bin", BrokenFileSystem())

    assert not loader.success
    assert "locked.bin" in loader.error


def test_buffer_loader_uses_injected_sniffer(memory_fs):
    memory_fs.files["a.bin"] = b"abcd"

    loader = BufferLoader("a.bin", memory_fs, sniffer=lambda data: True)

    assert loader.is_binary is True


def test_dispose_clears_payload(memory_fs):
    memory_fs.files["a.bin"] = b"abcd"
    loader = BufferLoader("a.bin", memory_fs)

    loader.dispose()

    assert not loader.success
    assert loader.disposed
    assert loader.data is None
    assert loader.text is None
    assert loader.is_binary is None


def test_context_manager_disposes(memory_fs):
    memory_fs.files["a.bin"] = b"abcd"

    with BufferLoader("a.bin", memory_fs) as loader:
        assert loader.data == b"abcd"

    assert not loader.success


def test_local_filesystem_resolves_relative_to_root(project_root):
    (project_root / "Buffers").mkdir()
    (project_root / "Buffers" / "a.bin").write_bytes(b"\x00\x01")
    fs = LocalFileSystem(project_root)

    assert fs.exists("Buffers/a.bin")
    assert not fs.exists("Buffers")
    assert BufferLoader("Buffers/a.bin", fs).data == b"\x00\x01"
