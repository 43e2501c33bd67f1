# geowoot/services/poller.py
"""
Client-side poller.

Polls ``GET /api/location``; when the reading has moved past the threshold it
reverse-geocodes it, and when the resolved country changes it pulls the
country metadata fragment from ``GET /api/country-metadata``.

    IDLE --reading--> LOCATED --geocode--> RESOLVED --metadata--> ANNOTATED
"""
import asyncio
import enum
from typing import Optional, Tuple

import httpx
import structlog

from ..core.config import settings
from ..schemas.common import LocationInfo, Reading
from ..utils.geo import moved
from ..utils.http import make_client
from .geocoding import reverse_geocode

log = structlog.get_logger(__name__)


class PollerState(str, enum.Enum):
    IDLE = "idle"
    LOCATED = "located"
    RESOLVED = "resolved"
    ANNOTATED = "annotated"


class ClientPoller:
    def __init__(
        self,
        api: httpx.AsyncClient,
        geocoder: httpx.AsyncClient,
        interval: Optional[float] = None,
        threshold_deg: Optional[float] = None,
    ):
        self.api = api
        self.geocoder = geocoder
        self.interval = settings.poll_interval_seconds if interval is None else interval
        self.threshold_deg = settings.move_threshold_deg if threshold_deg is None else threshold_deg

        self.state = PollerState.IDLE
        self.coords: Optional[Tuple[float, float]] = None
        self.location_info: Optional[LocationInfo] = None
        self.metadata: Optional[str] = None
        self._last_country: Optional[str] = None

    async def fetch_reading(self) -> Optional[Reading]:
        r = await self.api.get("/api/location")
        r.raise_for_status()
        data = r.json()
        if not isinstance(data, dict) or data.get("lat") is None or data.get("lng") is None:
            return None
        return Reading(**data)

    def _needs_geocode(self, reading: Reading) -> bool:
        if self.coords is None:
            return True
        return moved(self.coords[0], self.coords[1], reading.lat, reading.lng, self.threshold_deg)

    async def poll_once(self) -> PollerState:
        reading = await self.fetch_reading()
        if reading is None or not self._needs_geocode(reading):
            return self.state

        self.coords = (reading.lat, reading.lng)
        self.state = PollerState.LOCATED
        log.info("reading_changed", lat=reading.lat, lng=reading.lng)

        self.location_info = await reverse_geocode(reading.lat, reading.lng, self.geocoder)
        self.state = PollerState.RESOLVED

        country = self.location_info.country
        if country != "Unknown" and country != self._last_country:
            self._last_country = country
            self.metadata = await self.fetch_metadata(country)
        if country == self._last_country:
            self.state = PollerState.ANNOTATED
        return self.state

    async def fetch_metadata(self, country: str) -> Optional[str]:
        try:
            r = await self.api.get("/api/country-metadata", params={"country": country})
            r.raise_for_status()
        except httpx.HTTPError as ex:
            log.warning("metadata_fetch_failed", country=country, error=str(ex))
            return None
        return r.text

    async def run(self):
        """Poll forever; cancel the task to stop."""
        while True:
            try:
                await self.poll_once()
            except (httpx.HTTPError, ValueError) as ex:
                log.warning("poll_failed", error=str(ex))
            await asyncio.sleep(self.interval)


async def _main():
    async with make_client(base_url=settings.poller_base_url) as api, make_client() as geocoder:
        await ClientPoller(api, geocoder).run()


def main():
    from ..core.logging import setup_logging

    setup_logging()
    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        pass
