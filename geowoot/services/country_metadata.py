# geowoot/services/country_metadata.py
from dataclasses import dataclass
from typing import AsyncIterator, Literal, Optional

import httpx
import structlog

from ..core.config import settings
from ..core.errors import TransportError, UpstreamError, ValidationError
from ..utils.html import extract_main
from ..utils.http import make_client

log = structlog.get_logger(__name__)

NOT_FOUND_FRAGMENT = "<p>No metadata available for this country.</p>"
UNAVAILABLE_FRAGMENT = '<p class="text-muted-foreground">Unable to load metadata for this country.</p>'


@dataclass(frozen=True)
class MetadataResult:
    """Fragment handed back to the caller.

    ``failure`` records why a fallback was served ("upstream" or "transport");
    it never changes what the caller sees.
    """

    fragment: str
    failure: Optional[Literal["upstream", "transport"]] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def normalize_country(name: str) -> str:
    return name.lower().replace(" ", "_")


def country_page_url(country: str) -> str:
    return f"{settings.metadata_base.rstrip('/')}/metas/countries/{normalize_country(country)}/"


async def fetch_country_page(country: str, client: httpx.AsyncClient) -> str:
    """
    Fetch the metadata page for ``country`` and return its ``<main>`` content.

    404 is an answer, not an error: it yields NOT_FOUND_FRAGMENT.
    Raises UpstreamError for any other non-200 status and TransportError when
    the request can't be built, sent or decoded.
    """
    url = country_page_url(country)
    try:
        r = await client.get(url)
        if r.status_code == 404:
            return NOT_FOUND_FRAGMENT
        if r.status_code != 200:
            raise UpstreamError(r.status_code)
        body = r.text
    except (httpx.RequestError, httpx.InvalidURL) as ex:
        raise TransportError(f"{type(ex).__name__}: {ex}") from ex
    return extract_main(body)


async def fetch_metadata(country: Optional[str], client: httpx.AsyncClient) -> MetadataResult:
    if not country:
        raise ValidationError("Country parameter required")

    try:
        return MetadataResult(fragment=await fetch_country_page(country, client))
    except UpstreamError as ex:
        log.warning("metadata_fallback", country=country, failure="upstream", status_code=ex.status_code)
        return MetadataResult(fragment=UNAVAILABLE_FRAGMENT, failure="upstream")
    except TransportError as ex:
        log.warning("metadata_fallback", country=country, failure="transport", error=ex.message)
        return MetadataResult(fragment=UNAVAILABLE_FRAGMENT, failure="transport")


async def get_metadata_client() -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency: outbound client for the metadata site."""
    async with make_client(verify=settings.metadata_verify_tls) as client:
        yield client
