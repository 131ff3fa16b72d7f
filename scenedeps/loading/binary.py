# scenedeps/loading/binary.py
from __future__ import annotations

import struct

GLB_MAGIC = b"glTF"  # uint32 0x46546C67, little-endian
GLB_MAGIC_UINT = struct.unpack("<I", GLB_MAGIC)[0]


def is_gltf_binary(data: bytes) -> bool:
    """True if `data` starts with the binary glTF container signature."""
    if len(data) < 4:
        return False
    return struct.unpack_from("<I", data, 0)[0] == GLB_MAGIC_UINT


def decode_text(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")
