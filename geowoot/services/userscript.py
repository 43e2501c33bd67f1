# geowoot/services/userscript.py
from functools import lru_cache
from pathlib import Path
from ..core.config import settings

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "static" / "geowoot.user.js"
BASE_URL_PLACEHOLDER = "${BASE_URL}"

# The script instruments a third-party page; its match patterns and the
# coordinate regex are a fixed contract. Only the base URL is substituted.
@lru_cache(maxsize=1)
def load_template() -> str:
    return SCRIPT_PATH.read_text(encoding="utf-8")

def resolve_base_url(request_origin: str) -> str:
    return (settings.public_base_url or request_origin).rstrip("/")

def render_userscript(base_url: str) -> str:
    return load_template().replace(BASE_URL_PLACEHOLDER, base_url.rstrip("/"))
