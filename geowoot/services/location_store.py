# geowoot/services/location_store.py
import threading
from typing import Optional

import structlog

from ..core.errors import ValidationError
from ..schemas.common import Reading
from ..utils.geo import is_coordinate
from ..utils.time import iso_z, utc_now

log = structlog.get_logger(__name__)


class LocationStore:
    """Single-slot, last-write-wins holder for the latest reading.

    Only lives as long as the process. A multi-worker deployment needs a shared
    store behind the same two methods.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._reading: Optional[Reading] = None

    def update(self, lat, lng) -> Reading:
        if not is_coordinate(lat) or not is_coordinate(lng):
            raise ValidationError("Invalid coordinates. Both lat and lng must be numbers.")
        if lat < -90 or lat > 90:
            raise ValidationError("Latitude must be between -90 and 90.")
        if lng < -180 or lng > 180:
            raise ValidationError("Longitude must be between -180 and 180.")

        reading = Reading(lat=float(lat), lng=float(lng), timestamp=iso_z(utc_now()))
        with self._lock:
            self._reading = reading
        log.info("location_updated", lat=reading.lat, lng=reading.lng, timestamp=reading.timestamp)
        return reading

    def read(self) -> Optional[Reading]:
        with self._lock:
            return self._reading


location_store = LocationStore()


def get_location_store() -> LocationStore:
    return location_store
