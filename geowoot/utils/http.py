# geowoot/utils/http.py
import httpx
from typing import Optional

from ..core.config import settings

def default_headers() -> dict:
    return {"User-Agent": settings.user_agent}

def make_client(verify: bool = True, timeout: Optional[float] = None, **kwargs) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers=default_headers(),
        verify=verify,
        timeout=settings.http_timeout_seconds if timeout is None else timeout,
        **kwargs,
    )

async def get_json(client: httpx.AsyncClient, url: str, params: Optional[dict] = None):
    r = await client.get(url, params=params)
    r.raise_for_status()
    return r.json()
