# scenedeps/dependencies/__init__.py
from scenedeps.dependencies.cache import DependencyCache
from scenedeps.dependencies.store import load_dependencies, save_dependencies
from scenedeps.dependencies.types import AssetDependency, DependencyKind

__all__ = [
    "AssetDependency",
    "DependencyKind",
    "DependencyCache",
    "load_dependencies",
    "save_dependencies",
]
