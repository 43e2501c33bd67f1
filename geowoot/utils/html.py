import re

_MAIN_RE = re.compile(r"<main[^>]*>([\s\S]*?)</main>", re.IGNORECASE)

def extract_main(html: str) -> str:
    """Inner HTML of the first ``<main>`` element, or the whole document when there is none."""
    m = _MAIN_RE.search(html)
    return m.group(1) if m else html
