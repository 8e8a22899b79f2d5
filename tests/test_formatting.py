import pytest
from runpath.formatting import format_distance


@pytest.mark.parametrize(
    "meters, expected",
    [
        (0, "0m"),
        (0.5, "1m"),
        (849.4, "849m"),
        (999.4, "999m"),
        (1000, "1.00km"),
        (1234.0, "1.23km"),
        (42000, "42.00km"),
    ],
)
def test_format_distance(meters, expected):
    assert format_distance(meters) == expected


@pytest.mark.parametrize("meters", [float("inf"), float("-inf"), float("nan")])
def test_format_distance_non_finite(meters):
    assert format_distance(meters) == "--"
