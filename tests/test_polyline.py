# tests/test_polyline.py
import pytest

from alertmaps.core.errors import DecodeError
from alertmaps.geo.polyline import decode_polyline, encode_polyline
from alertmaps.models.geo import GeoPoint
from tests.payloads import CANONICAL_POLYLINE


def test_decode_canonical_example():
    points = decode_polyline(CANONICAL_POLYLINE)

    assert [(p.lat, p.lng) for p in points] == [
        pytest.approx((38.5, -120.2)),
        pytest.approx((40.7, -120.95)),
        pytest.approx((43.252, -126.453)),
    ]


@pytest.mark.parametrize("encoded", ["", None])
def test_decode_empty_input_returns_empty_path(encoded):
    assert decode_polyline(encoded) == []


def test_decode_single_zero_point():
    # "?" encodes a zero delta
    assert decode_polyline("??") == [GeoPoint(lat=0.0, lng=0.0)]


def test_decode_keeps_repeated_points():
    path = [GeoPoint(lat=1.0, lng=2.0), GeoPoint(lat=1.0, lng=2.0), GeoPoint(lat=1.5, lng=2.0)]

    assert decode_polyline(encode_polyline(path)) == path


def test_encode_canonical_example():
    path = [
        GeoPoint(lat=38.5, lng=-120.2),
        GeoPoint(lat=40.7, lng=-120.95),
        GeoPoint(lat=43.252, lng=-126.453),
    ]
    assert encode_polyline(path) == CANONICAL_POLYLINE


def test_round_trip_within_precision():
    # A short drive across San Francisco, with more decimals than the format keeps
    path = [
        GeoPoint(lat=37.774929, lng=-122.419416),
        GeoPoint(lat=37.779261, lng=-122.413112),
        GeoPoint(lat=37.784893, lng=-122.407482),
        GeoPoint(lat=37.784893, lng=-122.407482),
        GeoPoint(lat=37.791204, lng=-122.399914),
        GeoPoint(lat=-33.868820, lng=151.209296),
    ]

    decoded = decode_polyline(encode_polyline(path))

    assert len(decoded) == len(path)
    for original, got in zip(path, decoded):
        assert abs(original.lat - got.lat) <= 1e-5
        assert abs(original.lng - got.lng) <= 1e-5


def test_decode_is_deterministic():
    assert decode_polyline(CANONICAL_POLYLINE) == decode_polyline(CANONICAL_POLYLINE)


def test_decode_latitude_without_longitude_fails():
    with pytest.raises(DecodeError) as excinfo:
        decode_polyline("_p~iF")

    assert excinfo.value.position == 5


def test_decode_truncated_value_fails():
    # "|" still has the continuation bit set, then the string ends
    with pytest.raises(DecodeError, match="truncated"):
        decode_polyline("_p~iF~ps|")


def test_decode_rejects_characters_outside_alphabet():
    with pytest.raises(DecodeError) as excinfo:
        decode_polyline("_p~iF ps|U")

    assert excinfo.value.position == 5


def test_decode_rejects_overlong_values():
    # eight continuation chunks in a row cannot come from a 32-bit value
    with pytest.raises(DecodeError, match="too long"):
        decode_polyline("~~~~~~~~??")


def test_decode_error_is_a_value_error():
    with pytest.raises(ValueError):
        decode_polyline("~")


def test_encode_rounds_halves_away_from_zero():
    # 1/64 and 5/64 degrees are exact in binary and land on .5 units
    path = [
        GeoPoint(lat=0.015625, lng=-0.015625),
        GeoPoint(lat=0.078125, lng=-0.078125),
    ]

    decoded = decode_polyline(encode_polyline(path))

    assert [(p.lat, p.lng) for p in decoded] == [
        pytest.approx((0.01563, -0.01563)),
        pytest.approx((0.07813, -0.07813)),
    ]
    assert encode_polyline([GeoPoint(lat=0.015625, lng=0.0)]) == encode_polyline(
        [GeoPoint(lat=0.01563, lng=0.0)]
    )
