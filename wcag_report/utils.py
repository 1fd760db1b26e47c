"""Miscellaneous helpers for the calling layer."""
from typing import Dict, Optional
from urllib.parse import urlparse

from .schema import ErrorEnvelope


def is_valid_scan_url(url: str) -> bool:
    """Only absolute http(s) URLs with a host can be scanned."""
    if not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def error_envelope(error: str, message: Optional[str] = None) -> Dict[str, Optional[str]]:
    return ErrorEnvelope(error=error, message=message).model_dump(exclude_none=True)
