import pytest

from ascii_bros.config import EngineConfig
from ascii_bros.errors import ValidationError


def test_defaults() -> None:
    config = EngineConfig()
    assert (config.width, config.height) == (80, 25)
    assert config.tile_area == 4
    assert config.placeholder == "@"
    assert config.frame_duration == pytest.approx(1 / 30)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tile_area": 6},
        {"width": 0},
        {"height": -1},
        {"target_fps": 0},
        {"placeholder": "@@"},
        {"background": ""},
    ],
)
def test_invalid_values_are_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        EngineConfig(**kwargs)  # type: ignore[arg-type]
