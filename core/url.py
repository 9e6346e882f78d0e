# core/url.py
import re

_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(raw: str) -> str:
    """
    Trim and prepend `http://` to bare domains. Blank input stays blank.
    """
    t = (raw or "").strip()
    if not t:
        return ""
    if not _SCHEME.match(t):
        return "http://" + t
    return t
