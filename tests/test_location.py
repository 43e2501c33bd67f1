"""Tests for the location store and /api/location."""

from datetime import datetime, timedelta, timezone

import pytest

from geowoot.core.errors import ValidationError
from geowoot.utils.geo import is_coordinate


def _parse(ts: str) -> datetime:
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


def test_read_before_update_is_none(store):
    assert store.read() is None


@pytest.mark.parametrize("lat,lng", [(0, 0), (48.8566, 2.3522), (-90, -180), (90, 180), (-33.9, 151.2)])
def test_update_then_read_returns_pair(store, lat, lng):
    before = datetime.now(timezone.utc) - timedelta(seconds=1)
    reading = store.update(lat, lng)
    current = store.read()
    assert current == reading
    assert (current.lat, current.lng) == (lat, lng)
    ts = _parse(current.timestamp)
    assert before <= ts <= datetime.now(timezone.utc) + timedelta(seconds=1)
    assert current.timestamp.endswith("Z")


@pytest.mark.parametrize(
    "lat,lng,message",
    [
        (95, 0, "Latitude must be between -90 and 90."),
        (-90.5, 0, "Latitude must be between -90 and 90."),
        (0, -200, "Longitude must be between -180 and 180."),
        (0, 180.01, "Longitude must be between -180 and 180."),
        ("1.0", 2.0, "Invalid coordinates. Both lat and lng must be numbers."),
        (1.0, None, "Invalid coordinates. Both lat and lng must be numbers."),
        (True, 2.0, "Invalid coordinates. Both lat and lng must be numbers."),
        (float("nan"), 2.0, "Invalid coordinates. Both lat and lng must be numbers."),
        (1.0, float("inf"), "Invalid coordinates. Both lat and lng must be numbers."),
    ],
)
def test_invalid_update_leaves_reading_unchanged(store, lat, lng, message):
    kept = store.update(10.0, 20.0)
    with pytest.raises(ValidationError) as exc:
        store.update(lat, lng)
    assert exc.value.message == message
    assert store.read() == kept


def test_last_write_wins(store):
    store.update(1.0, 1.0)
    store.update(2.0, 3.0)
    assert (store.read().lat, store.read().lng) == (2.0, 3.0)


def test_get_location_null_initially(client):
    r = client.get("/api/location")
    assert r.status_code == 200
    assert r.json() is None
    assert r.headers["access-control-allow-origin"] == "*"


def test_post_location_ok(client):
    r = client.post("/api/location", json={"lat": 51.5, "lng": -0.12})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["location"]["lat"] == 51.5
    assert body["location"]["lng"] == -0.12
    assert "timestamp" in body["location"]

    r = client.get("/api/location")
    assert r.json() == body["location"]


def test_post_location_out_of_range(client, store):
    r = client.post("/api/location", json={"lat": 95, "lng": 0})
    assert r.status_code == 400
    assert r.json() == {"error": "Latitude must be between -90 and 90."}
    assert r.headers["access-control-allow-origin"] == "*"
    assert store.read() is None


def test_post_location_not_numbers(client):
    r = client.post("/api/location", json={"lat": "12", "lng": 3})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid coordinates. Both lat and lng must be numbers."}


def test_post_location_missing_fields(client):
    r = client.post("/api/location", json={"lat": 12})
    assert r.status_code == 400


def test_post_location_non_object_body(client):
    r = client.post("/api/location", json=[1, 2])
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid coordinates. Both lat and lng must be numbers."}


def test_post_location_invalid_json(client):
    r = client.post("/api/location", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid JSON body"}


def test_options_location(client):
    r = client.options("/api/location")
    assert r.status_code == 200
    assert r.json() == {}
    assert r.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert r.headers["access-control-allow-headers"] == "Content-Type"


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["message"] == "OK"


def test_post_location_null_body(client, store):
    r = client.post("/api/location", content=b"null", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid JSON body"}
    assert store.read() is None


def test_post_location_integer_too_large_for_float(client, store):
    huge = "1" + "0" * 400
    body = f'{{"lat": {huge}, "lng": 0}}'
    r = client.post("/api/location", content=body, headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid coordinates. Both lat and lng must be numbers."}
    assert store.read() is None


def test_post_location_integer_past_digit_limit(client, store):
    huge = "1" * 5000
    body = f'{{"lat": {huge}, "lng": 0}}'
    r = client.post("/api/location", content=body, headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert store.read() is None


def test_is_coordinate_rejects_overflowing_int():
    assert is_coordinate(10**400) is False
    assert is_coordinate(45) is True
