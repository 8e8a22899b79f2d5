import io
import gpxpy.gpx
import pytest

from runpath.codec import ParseError
from runpath.geometry import BoundingBox, Coordinate
from runpath.geometry_utils import path_length
from runpath.region import SHANGHAI_REGION
from runpath.route import Route


GPX_TRACK = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="runpath-tests" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <trkseg>
      <trkpt lat="31.2304" lon="121.4737"><ele>4.0</ele></trkpt>
      <trkpt lat="31.2310" lon="121.4745"><ele>4.5</ele></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="31.2320" lon="121.4760"><ele>5.0</ele></trkpt>
    </trkseg>
  </trk>
</gpx>
"""

GPX_ROUTE_ONLY = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="runpath-tests" xmlns="http://www.topografix.com/GPX/1/1">
  <rte>
    <rtept lat="31.0" lon="121.0"></rtept>
    <rtept lat="31.1" lon="121.2"></rtept>
  </rte>
</gpx>
"""


def test_route_creation_and_basic_properties():
    """
    Tests basic Route creation, coordinate storage, length, indexing, and iteration.
    """
    points = [(121.47, 31.23), (121.48, 31.24), (121.49, 31.25)]
    route = Route(points)

    assert route.coords == [Coordinate(*p) for p in points]
    assert len(route) == 3
    assert route[0] == Coordinate(121.47, 31.23)
    assert route[-1] == Coordinate(121.49, 31.25)
    assert list(route) == route.coords

    empty_route = Route([])
    assert len(empty_route) == 0
    assert empty_route.length == 0.0
    assert empty_route.cumulative_distances == []

def test_route_length_is_memoized():
    route = Route([(0.0, 0.0), (0.0, 1.0)])
    assert route.length == pytest.approx(path_length(route.coords))
    assert route.length is route.length
    assert route.cumulative_distances[-1] == pytest.approx(route.length)

def test_route_bounds():
    route = Route([(1, 1), (3, 5), (2, -1)])
    assert route.get_bounds() == BoundingBox(1, -1, 3, 5)
    assert Route([]).get_bounds(Coordinate(5, 6)) == BoundingBox(5, 6, 5, 6)

def test_route_simplify_returns_new_route():
    route = Route([(0, 0), (0, 0.5), (0, 1)])
    simplified = route.simplify()
    assert isinstance(simplified, Route)
    assert simplified.coords == [(0, 0), (0, 1)]
    assert len(route) == 3

def test_route_within_region():
    route = Route([(121.0, 31.0), (0.0, 0.0)])
    assert route.within(SHANGHAI_REGION) == [(121.0, 31.0)]

def test_route_encode_decode():
    route = Route.decode("121.473700,31.230400;121.474500,31.231000")
    assert len(route) == 2
    assert route.encode() == "121.473700,31.230400;121.474500,31.231000"

def test_route_decode_malformed():
    with pytest.raises(ParseError):
        Route.decode("121.0;31.0")

def test_projected_length_close_to_haversine():
    route = Route([(121.47, 31.23), (121.48, 31.24), (121.50, 31.22)])
    assert route.projected_length == pytest.approx(route.length, rel=0.01)

def test_projected_length_short_route():
    assert Route([(121.0, 31.0)]).projected_length == 0.0
    with pytest.raises(ValueError):
        Route([(121.0, 31.0)]).linestring

def test_from_gpx_concatenates_segments():
    route = Route.from_gpx(io.StringIO(GPX_TRACK))
    assert route.coords == [
        Coordinate(121.4737, 31.2304),
        Coordinate(121.4745, 31.2310),
        Coordinate(121.4760, 31.2320),
    ]

def test_from_gpx_falls_back_to_route_points():
    route = Route.from_gpx(io.StringIO(GPX_ROUTE_ONLY))
    assert route.coords == [Coordinate(121.0, 31.0), Coordinate(121.2, 31.1)]

def test_from_gpx_malformed():
    with pytest.raises(gpxpy.gpx.GPXException):
        Route.from_gpx(io.StringIO("this is not xml"))

def test_from_file_gpx(tmp_path):
    gpx_file = tmp_path / "morning run.GPX"
    gpx_file.write_text(GPX_TRACK, encoding="utf-8")
    route = Route.from_file(str(gpx_file))
    assert len(route) == 3

def test_from_file_encoded(tmp_path):
    text_file = tmp_path / "route.txt"
    text_file.write_text("121.0,31.0;121.1,31.1\n", encoding="utf-8")
    route = Route.from_file(str(text_file))
    assert route.coords == [Coordinate(121.0, 31.0), Coordinate(121.1, 31.1)]

def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Route.from_file(str(tmp_path / "missing.gpx"))
