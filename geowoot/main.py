from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import structlog

from .core.config import settings
from .core.errors import ValidationError
from .core.logging import setup_logging
from .routers import country_metadata, location, script
from .routers.cors import error_response

setup_logging()
log = structlog.get_logger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(location.router)
app.include_router(country_metadata.router)
app.include_router(script.router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    log.info("request_rejected", path=request.url.path, error=exc.message)
    return error_response(exc.message)


@app.get("/")
def root():
    return {"name": settings.app_name, "env": settings.app_env, "message": "OK"}
