import dataclasses
import pytest
from runpath.geometry import BoundingBox, SHANGHAI_CENTER
from runpath.region import Region, SHANGHAI_REGION, contains, filter_path


def test_shanghai_center_is_inside_shanghai():
    assert contains(SHANGHAI_REGION, SHANGHAI_CENTER)

def test_point_outside_region():
    beijing = (116.4074, 39.9042)
    assert not contains(SHANGHAI_REGION, beijing)

@pytest.mark.parametrize(
    "point",
    [(120.8, 31.0), (122.2, 31.0), (121.0, 30.7), (121.0, 31.9), (120.8, 30.7), (122.2, 31.9)],
)
def test_edges_are_inclusive(point):
    assert SHANGHAI_REGION.contains(point)

@pytest.mark.parametrize(
    "point",
    [(120.79999, 31.0), (122.20001, 31.0), (121.0, 30.69999), (121.0, 31.90001)],
)
def test_just_outside_edges(point):
    assert not SHANGHAI_REGION.contains(point)

def test_custom_region_is_injected():
    region = Region(min_lon=0.0, min_lat=0.0, max_lon=1.0, max_lat=1.0, name="unit")
    assert contains(region, (0.5, 0.5))
    assert not contains(region, SHANGHAI_CENTER)

def test_inverted_region_rejected():
    with pytest.raises(ValueError, match="inverted"):
        Region(min_lon=2.0, min_lat=0.0, max_lon=1.0, max_lat=1.0)

def test_degenerate_region_contains_its_point():
    region = Region.from_bounds(BoundingBox(1.0, 2.0, 1.0, 2.0))
    assert region.contains((1.0, 2.0))
    assert not region.contains((1.0, 2.000001))

def test_region_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SHANGHAI_REGION.min_lon = 0.0

def test_filter_path_keeps_order():
    path = [(121.0, 31.0), (0.0, 0.0), (122.0, 31.5), (121.5, 40.0)]
    assert filter_path(SHANGHAI_REGION, path) == [(121.0, 31.0), (122.0, 31.5)]

def test_filter_path_empty():
    assert filter_path(SHANGHAI_REGION, []) == []
