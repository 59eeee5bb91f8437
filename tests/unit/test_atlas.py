import pytest

from ascii_bros.atlas import TileAtlas
from ascii_bros.errors import ConsistencyError, ValidationError
from ascii_bros.tile import default_colors


def test_empty_atlas() -> None:
    atlas = TileAtlas()
    assert len(atlas) == 0
    assert atlas.next_id == 0
    assert atlas.stride == 2
    assert not atlas.contains("abcd")
    assert atlas.find_id("abcd") is None


def test_insert_assigns_dense_increasing_ids() -> None:
    atlas = TileAtlas()
    ids = [atlas.insert(pixels, default_colors()) for pixels in ("abcd", "efgh", "ijkl")]
    assert ids == [0, 1, 2]
    assert atlas.next_id == 3
    assert len(atlas) == 3
    assert all(tile_id in atlas for tile_id in ids)


def test_find_id_and_contains_after_insert() -> None:
    atlas = TileAtlas()
    tile_id = atlas.insert("abcd", default_colors())
    assert atlas.contains("abcd")
    assert atlas.find_id("abcd") == tile_id
    assert not atlas.contains("abce")


def test_get_returns_stored_tile() -> None:
    atlas = TileAtlas()
    colors = (31, 32, 33, 34)
    tile_id = atlas.insert("abcd", colors)
    tile = atlas.get(tile_id)
    assert tile.id == tile_id
    assert tile.pixels == "abcd"
    assert tile.colors == colors


def test_get_unknown_id_is_consistency_error() -> None:
    atlas = TileAtlas()
    atlas.insert("abcd", default_colors())
    with pytest.raises(ConsistencyError):
        atlas.get(1)


def test_duplicate_insert_is_consistency_error() -> None:
    atlas = TileAtlas()
    atlas.insert("abcd", default_colors())
    with pytest.raises(ConsistencyError):
        atlas.insert("abcd", default_colors())
    assert len(atlas) == 1
    assert atlas.next_id == 1


@pytest.mark.parametrize(
    "pixels, colors",
    [
        ("abc", (32, 32, 32)),
        ("abcde", (32,) * 5),
        ("abcd", (32, 32)),
    ],
)
def test_insert_rejects_wrong_buffer_length(pixels: str, colors: tuple[int, ...]) -> None:
    atlas = TileAtlas()
    with pytest.raises(ValidationError):
        atlas.insert(pixels, colors)
    assert len(atlas) == 0


def test_tiles_snapshot_is_not_affected_by_later_inserts() -> None:
    atlas = TileAtlas()
    atlas.insert("abcd", default_colors())
    snapshot = atlas.tiles
    atlas.insert("efgh", default_colors())
    assert len(snapshot) == 1
    assert len(atlas.tiles) == 2


def test_atlases_do_not_share_counters() -> None:
    first, second = TileAtlas(), TileAtlas()
    first.insert("abcd", default_colors())
    assert second.insert("wxyz", default_colors()) == 0


def test_larger_tile_area() -> None:
    atlas = TileAtlas(tile_area=9)
    assert atlas.stride == 3
    assert atlas.insert("abcdefghi", default_colors(9)) == 0


def test_dump_lists_tiles_in_id_order() -> None:
    atlas = TileAtlas()
    atlas.insert("ab d", default_colors())
    atlas.insert("wxyz", default_colors())
    assert atlas.dump() == ["0  [a, b,  , d]", "1  [w, x, y, z]"]
