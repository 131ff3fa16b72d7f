# scenedeps/settings.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportSettings:
    """Where an import pass reads from and how it downloads."""

    project_root: Path = field(default_factory=Path.cwd)
    http_timeout: float = 30.0  # seconds
    dependency_file: str = "dependencies.json"

    def __post_init__(self) -> None:
        object.__setattr__(self, "project_root", Path(self.project_root))

    @property
    def dependency_path(self) -> Path:
        return self.project_root / self.dependency_file
