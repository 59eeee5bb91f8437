import pytest

from ascii_bros.components import Position
from ascii_bros.utils.math import round_half_away


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, 0),
        (0.4, 0),
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (-0.4, 0),
        (-0.5, -1),
        (-2.5, -3),
    ],
)
def test_round_half_away(value: float, expected: int) -> None:
    assert round_half_away(value) == expected


def test_position_cell() -> None:
    assert Position(4.5, 2.49).cell() == (5, 2)
