import pytest

from scenedeps.dependencies.cache import DependencyCache
from scenedeps.dependencies.types import AssetDependency, DependencyKind


def test_resolve_reuses_previous_mapping(previous):
    cache = DependencyCache(previous)

    path = cache.resolve("tex.png", DependencyKind.TEXTURE)

    assert path == "Textures/tex.png"
    assert cache.dependencies == (previous[0],)


@pytest.mark.parametrize(
    "kind",
    [DependencyKind.BUFFER, DependencyKind.TEXTURE, DependencyKind.UNKNOWN],
)
def test_previous_mapping_wins_over_requested_kind(previous, kind):
    cache = DependencyCache(previous)

    assert cache.resolve("scene.bin", kind) == "Buffers/scene.bin"
    assert cache.dependencies[0].kind is DependencyKind.BUFFER


def test_resolve_new_uri_uses_uri_as_path():
    cache = DependencyCache()

    path = cache.resolve("meshes/new.bin", DependencyKind.BUFFER)

    assert path == "meshes/new.bin"
    assert cache.dependencies == (
        AssetDependency(
            original_uri="meshes/new.bin",
            asset_path="meshes/new.bin",
            kind=DependencyKind.BUFFER,
        ),
    )


def test_unknown_previous_record_counts_as_missing():
    stale = AssetDependency(
        original_uri="a.png",
        asset_path="Textures/a.png",
        kind=DependencyKind.UNKNOWN,
    )
    cache = DependencyCache([stale])

    assert cache.find_previous("a.png") is None
    assert cache.resolve("a.png", DependencyKind.TEXTURE) == "a.png"
    assert cache.dependencies[0].kind is DependencyKind.TEXTURE


def test_first_previous_match_wins():
    first = AssetDependency("a.bin", "First/a.bin", DependencyKind.BUFFER)
    second = AssetDependency("a.bin", "Second/a.bin", DependencyKind.BUFFER)
    cache = DependencyCache([first, second])

    assert cache.resolve("a.bin", DependencyKind.BUFFER) == "First/a.bin"


def test_repeat_resolution_is_stable_and_appends_every_call(previous):
    cache = DependencyCache(previous)

    for uri in ("tex.png", "new.bin"):
        first = cache.resolve(uri, DependencyKind.BUFFER)
        second = cache.resolve(uri, DependencyKind.BUFFER)
        assert first == second

    assert len(cache) == 4
    assert [d.original_uri for d in cache.dependencies] == [
        "tex.png",
        "tex.png",
        "new.bin",
        "new.bin",
    ]


def test_resolve_accepts_non_string_uri():
    class Uri:
        def __str__(self) -> str:
            return "http://example.com/a.bin"

    cache = DependencyCache()

    assert cache.resolve(Uri(), DependencyKind.BUFFER) == (
        "http://example.com/a.bin"
    )


def test_previous_snapshot_is_not_modified(previous):
    cache = DependencyCache(list(previous))

    cache.resolve("other.png", DependencyKind.TEXTURE)

    assert cache.previous == previous


def test_reset_clears_current_list_only(previous):
    cache = DependencyCache(previous)
    cache.resolve("tex.png", DependencyKind.TEXTURE)

    cache.reset()

    assert cache.dependencies == ()
    assert cache.resolve("tex.png", DependencyKind.TEXTURE) == (
        "Textures/tex.png"
    )
