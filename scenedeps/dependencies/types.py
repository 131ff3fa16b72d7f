# scenedeps/dependencies/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping


class DependencyKind(str, Enum):
    """Kind of external resource a scene references."""

    UNKNOWN = "unknown"  # only ever read back from old snapshots
    BUFFER = "buffer"
    TEXTURE = "texture"


@dataclass(frozen=True, slots=True)
class AssetDependency:
    """
    Maps a resource's original URI to the local asset it resolved to.
    `original_uri` is the identity key.
    """

    original_uri: str
    asset_path: str
    kind: DependencyKind

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_uri": self.original_uri,
            "asset_path": self.asset_path,
            "kind": self.kind.value,
        }

    @staticmethod
    def from_dict(raw: Mapping[str, Any]) -> AssetDependency:
        original_uri = str(raw["original_uri"])
        try:
            kind = DependencyKind(raw.get("kind", DependencyKind.UNKNOWN))
        except ValueError:
            kind = DependencyKind.UNKNOWN

        return AssetDependency(
            original_uri=original_uri,
            asset_path=str(raw.get("asset_path") or original_uri),
            kind=kind,
        )
