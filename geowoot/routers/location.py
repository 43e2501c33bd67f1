# geowoot/routers/location.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..schemas.common import LocationUpdated
from ..services.location_store import LocationStore, get_location_store
from .cors import LOCATION_CORS_HEADERS, error_response

router = APIRouter(prefix="/api/location", tags=["location"])


@router.options("")
def location_options():
    return JSONResponse({}, headers=LOCATION_CORS_HEADERS)


@router.post("")
async def update_location(request: Request, store: LocationStore = Depends(get_location_store)):
    # Parsed by hand: bad input must answer 400 {"error": ...}, not FastAPI's 422
    try:
        body = await request.json()
    except ValueError:  # JSONDecodeError, UnicodeDecodeError, oversized ints
        return error_response("Invalid JSON body")
    if body is None:
        return error_response("Invalid JSON body")

    if not isinstance(body, dict):
        body = {}
    reading = store.update(body.get("lat"), body.get("lng"))  # ValidationError -> 400 in main
    return JSONResponse(
        LocationUpdated(location=reading).model_dump(),
        headers=LOCATION_CORS_HEADERS,
    )


@router.get("")
def read_location(store: LocationStore = Depends(get_location_store)):
    reading = store.read()
    return JSONResponse(reading.model_dump() if reading else None, headers=LOCATION_CORS_HEADERS)
