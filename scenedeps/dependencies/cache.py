# scenedeps/dependencies/cache.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from scenedeps.dependencies.types import AssetDependency, DependencyKind

logger = logging.getLogger(__name__)


class DependencyCache:
    """
    Resolves resource URIs against the dependencies recorded by a previous
    import and records the dependencies of the current one.

    The previous snapshot is read-only. The current list only grows during a
    session and is what the host persists for the next one.
    """

    def __init__(
        self, previous: Optional[Iterable[AssetDependency]] = None
    ) -> None:
        self._previous: Tuple[AssetDependency, ...] = tuple(previous or ())
        self._current: List[AssetDependency] = []

    @property
    def previous(self) -> Tuple[AssetDependency, ...]:
        return self._previous

    @property
    def dependencies(self) -> Tuple[AssetDependency, ...]:
        """Snapshot of the dependencies recorded so far."""
        return tuple(self._current)

    def find_previous(self, uri: object) -> Optional[AssetDependency]:
        """
        First previous record for `uri`. Records of unknown kind count as
        missing.
        """
        key = str(uri)
        for dependency in self._previous:
            if dependency.original_uri == key:
                if dependency.kind is DependencyKind.UNKNOWN:
                    return None
                return dependency
        return None

    def resolve(self, uri: object, kind: DependencyKind) -> str:
        """
        Return the path `uri` should be loaded from.

        A previous record wins regardless of `kind`. Otherwise the URI itself
        is used as the path and a new record of `kind` is started. Every call
        appends to the current list, repeats included.
        """
        key = str(uri)
        previous = self.find_previous(key)

        if previous is not None:
            self._current.append(previous)
            logger.debug(
                "Reusing dependency %s -> %s", key, previous.asset_path
            )
            return previous.asset_path

        dependency = AssetDependency(
            original_uri=key, asset_path=key, kind=kind
        )
        self._current.append(dependency)
        logger.debug("New %s dependency %s", kind.value, key)
        return dependency.asset_path

    def reset(self) -> None:
        """Forget the current list, keeping the previous snapshot."""
        self._current.clear()

    def __len__(self) -> int:
        return len(self._current)
