# scenedeps/dependencies/store.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Tuple, Union

from scenedeps.dependencies.types import AssetDependency

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def save_dependencies(
    path: Union[str, Path], dependencies: Iterable[AssetDependency]
) -> None:
    """Write a dependency list, keeping order and duplicates."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    document = {
        "version": FORMAT_VERSION,
        "dependencies": [d.to_dict() for d in dependencies],
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)

    logger.debug(
        "Saved %d dependencies to %s", len(document["dependencies"]), path
    )


def load_dependencies(path: Union[str, Path]) -> Tuple[AssetDependency, ...]:
    """
    Read a dependency list written by `save_dependencies`.

    A missing file means a first import and yields nothing. An unreadable
    document is logged and also yields nothing, so the import falls back to
    first-time resolution.
    """
    path = Path(path)
    if not path.is_file():
        return ()

    try:
        with path.open("r", encoding="utf-8") as f:
            document = json.load(f)
        entries = document["dependencies"]
        return tuple(AssetDependency.from_dict(entry) for entry in entries)
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.warning("Ignoring unreadable dependency file %s: %s", path, e)
        return ()
