# geowoot/routers/script.py
from fastapi import APIRouter, Request
from fastapi.responses import Response

from ..services.userscript import render_userscript, resolve_base_url

router = APIRouter(tags=["script"])


@router.get("/script.user.js")
def userscript(request: Request):
    base = resolve_base_url(str(request.base_url))
    return Response(render_userscript(base), media_type="text/javascript; charset=utf-8")
