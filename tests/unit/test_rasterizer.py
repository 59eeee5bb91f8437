import pytest

from ascii_bros.atlas import TileAtlas
from ascii_bros.errors import ValidationError
from ascii_bros.rasterizer import (
    load_sprite,
    parse_raster,
    rasterize,
    split_blocks,
    validate_raster,
)
from ascii_bros.tile import DEFAULT_COLOR
from ascii_bros.types import EntityType
from tests.test_utils import REPEATED_CORNER_ROWS, make_sprite


def test_parse_raster_substitutes_placeholder() -> None:
    assert parse_raster("@ab@\n@@@@\n") == [" ab ", "    "]


def test_parse_raster_custom_placeholder() -> None:
    assert parse_raster("_x\nx_", placeholder="_") == [" x", "x "]


def test_parse_raster_handles_crlf() -> None:
    assert parse_raster("ab\r\ncd\r\n") == ["ab", "cd"]


def test_parse_raster_keeps_control_glyphs_inside_rows() -> None:
    assert parse_raster("a\x1cbc\nde\x85f\n") == ["a\x1cbc", "de\x85f"]
    assert parse_raster("ab c\n") == ["ab c"]


def test_parse_raster_drops_only_one_trailing_empty_line() -> None:
    assert parse_raster("ab\ncd") == ["ab", "cd"]
    assert parse_raster("ab\n\n") == ["ab", ""]


def test_split_blocks_reads_row_major_within_blocks() -> None:
    assert split_blocks(REPEATED_CORNER_ROWS, 2) == ["abef", "cdgh", "ijkl", "abef"]


def test_repeated_block_is_deduplicated() -> None:
    atlas = TileAtlas()
    tile_ids = rasterize(atlas, REPEATED_CORNER_ROWS)
    assert len(tile_ids) == 4
    assert tile_ids[0] == tile_ids[3]
    assert len(set(tile_ids)) == 3
    assert len(atlas) == 3
    assert tile_ids == (0, 1, 2, 0)


def test_new_tiles_get_placeholder_colors() -> None:
    atlas = TileAtlas()
    rasterize(atlas, ["ab", "cd"])
    assert atlas.get(0).colors == (DEFAULT_COLOR,) * 4


def test_given_colors_apply_to_new_tiles_only() -> None:
    atlas = TileAtlas()
    rasterize(atlas, ["ab", "cd"])
    tile_ids = rasterize(atlas, ["abef", "cdgh"], colors=(31, 33, 34, 35))
    assert tile_ids == (0, 1)
    assert atlas.get(0).colors == (DEFAULT_COLOR,) * 4
    assert atlas.get(1).colors == (31, 33, 34, 35)


def test_load_sprite_passes_colors_through() -> None:
    atlas = TileAtlas()
    load_sprite(atlas, "ab\ncd\n", name="red", colors=(31,) * 4)
    assert atlas.get(0).colors == (31,) * 4


def test_wrong_color_length_is_rejected_without_touching_atlas() -> None:
    atlas = TileAtlas()
    with pytest.raises(ValidationError, match="colors"):
        rasterize(atlas, ["ab", "cd"], colors=(31, 32))
    assert len(atlas) == 0


def test_dedup_across_sprites() -> None:
    atlas = TileAtlas()
    first = rasterize(atlas, ["abxx", "cdxx"])
    second = rasterize(atlas, ["xxab", "xxcd"])
    assert first == (0, 1)
    assert second == (1, 0)
    assert len(atlas) == 2


def test_atlas_never_holds_duplicate_content() -> None:
    atlas = TileAtlas()
    rasterize(atlas, REPEATED_CORNER_ROWS)
    rasterize(atlas, ["abcd", "efgh", "abcd", "efgh"])
    contents = [tile.pixels for tile in atlas.tiles.values()]
    assert len(contents) == len(set(contents))


def test_rasterize_is_deterministic_for_fixed_atlas_state() -> None:
    atlas = TileAtlas()
    first = rasterize(atlas, REPEATED_CORNER_ROWS)
    size = len(atlas)
    second = rasterize(atlas, REPEATED_CORNER_ROWS)
    assert first == second
    assert len(atlas) == size


def test_same_load_order_gives_same_ids() -> None:
    rasters = [["abcd", "efgh"], REPEATED_CORNER_ROWS, ["zzzz", "zzzz"]]
    runs = []
    for _ in range(2):
        atlas = TileAtlas()
        runs.append([rasterize(atlas, rows) for rows in rasters])
    assert runs[0] == runs[1]


def test_width_not_multiple_of_stride_is_rejected() -> None:
    atlas = TileAtlas()
    with pytest.raises(ValidationError, match="width"):
        rasterize(atlas, ["abcde", "fghij"])
    assert len(atlas) == 0


def test_width_multiple_of_stride_is_accepted() -> None:
    atlas = TileAtlas()
    assert len(rasterize(atlas, ["abcd", "efgh"])) == 2


def test_height_not_multiple_of_stride_is_rejected() -> None:
    atlas = TileAtlas()
    with pytest.raises(ValidationError, match="height"):
        rasterize(atlas, ["ab", "cd", "ef"])
    assert len(atlas) == 0


def test_ragged_rows_are_rejected_without_touching_atlas() -> None:
    atlas = TileAtlas()
    with pytest.raises(ValidationError, match="Malformed"):
        rasterize(atlas, ["abcd", "efg", "ijkl", "mnop"])
    assert len(atlas) == 0


@pytest.mark.parametrize("rows", [[], [""], ["", ""]])
def test_empty_raster_is_rejected(rows: list[str]) -> None:
    with pytest.raises(ValidationError):
        validate_raster(rows, 2)


def test_larger_stride() -> None:
    atlas = TileAtlas(tile_area=9)
    rows = ["abcabc", "defdef", "ghighi"]
    assert rasterize(atlas, rows) == (0, 0)
    assert atlas.get(0).pixels == "abcdefghi"


def test_load_sprite_builds_validated_sprite() -> None:
    atlas = TileAtlas()
    sprite = load_sprite(
        atlas,
        "@##@\n####\n",
        name="cap",
        z_order=7,
        entity_type=EntityType.MUSHROOM,
    )
    assert sprite.name == "cap"
    assert (sprite.width, sprite.height) == (4, 2)
    assert sprite.z_order == 7
    assert sprite.entity_type == EntityType.MUSHROOM
    assert atlas.get(sprite.tile_ids[0]).pixels == " ###"
    assert atlas.get(sprite.tile_ids[1]).pixels == "# ##"


def test_sprite_tile_count_matches_blocks() -> None:
    atlas = TileAtlas()
    sprite = make_sprite(atlas, ["abcdef", "ghijkl", "mnopqr", "stuvwx"])
    assert sprite.columns == 3
    assert sprite.rows == 2
    assert len(sprite.tile_ids) == 6
