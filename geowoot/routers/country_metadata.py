# geowoot/routers/country_metadata.py
from typing import Optional

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from ..core.errors import ValidationError
from ..services.country_metadata import fetch_metadata, get_metadata_client
from .cors import METADATA_CORS_HEADERS, error_response

router = APIRouter(prefix="/api/country-metadata", tags=["country-metadata"])


@router.options("")
def country_metadata_options():
    return Response(headers=METADATA_CORS_HEADERS)


@router.get("")
async def country_metadata(
    country: Optional[str] = None,
    client: httpx.AsyncClient = Depends(get_metadata_client),
):
    try:
        result = await fetch_metadata(country, client)
    except ValidationError as ex:
        return error_response(ex.message, headers=METADATA_CORS_HEADERS)
    return HTMLResponse(result.fragment, headers=METADATA_CORS_HEADERS)
