# geowoot/services/geocoding.py
import httpx
import structlog

from ..core.config import settings
from ..schemas.common import LocationInfo
from ..utils.http import get_json

log = structlog.get_logger(__name__)

_CITY_KEYS = ("city", "town", "village", "county")


def parse_nominatim(payload) -> LocationInfo:
    """Map a Nominatim ``/reverse`` payload to city/country, "Unknown" for gaps."""
    address = (payload or {}).get("address") or {}
    city = next((address[k] for k in _CITY_KEYS if address.get(k)), "Unknown")
    return LocationInfo(city=city, country=address.get("country") or "Unknown")


async def reverse_geocode(lat: float, lng: float, client: httpx.AsyncClient) -> LocationInfo:
    url = f"{settings.nominatim_base.rstrip('/')}/reverse"
    params = {"format": "json", "lat": lat, "lon": lng, "zoom": 12}
    try:
        payload = await get_json(client, url, params=params)
    except (httpx.HTTPError, ValueError) as ex:
        log.warning("reverse_geocode_failed", lat=lat, lng=lng, error=str(ex))
        return LocationInfo()
    if not isinstance(payload, dict):
        return LocationInfo()
    return parse_nominatim(payload)
