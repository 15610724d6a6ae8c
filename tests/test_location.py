import pytest

from weatherdesk.domain import LocationKind, resolve_location


@pytest.mark.parametrize(
    "raw, lat, lon",
    [
        ("40.7128,-74.0060", 40.7128, -74.006),
        ("-33.86,151.21", -33.86, 151.21),
        ("10,20", 10.0, 20.0),
        ("10.,-20.", 10.0, -20.0),
    ],
)
def test_coordinate_pairs_are_detected(raw, lat, lon):
    resolved = resolve_location(raw)

    assert resolved.kind is LocationKind.COORDINATES
    assert resolved.is_coordinates
    assert resolved.lat == pytest.approx(lat)
    assert resolved.lon == pytest.approx(lon)
    assert resolved.raw == raw


@pytest.mark.parametrize(
    "raw",
    [
        "Paris",
        "New York, US",
        "40.7128, -74.0060",
        " 40.7,-74.0",
        "1,2,3",
        "+40.7,-74.0",
        "40.7;-74.0",
        "",
    ],
)
def test_everything_else_is_a_name(raw):
    resolved = resolve_location(raw)

    assert resolved.kind is LocationKind.NAME
    assert resolved.lat is None
    assert resolved.lon is None
    assert resolved.raw == raw
