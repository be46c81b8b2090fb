from __future__ import annotations

from urllib.parse import quote, urlparse


def safe_image_url(value: str | None) -> str | None:
    if not value:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"}:
        return None
    if not parsed.netloc:
        return None
    return value


def storage_url(base_url: str, path: str | None) -> str | None:
    """Absolute URL of a server-relative storage path (client photos, passport scans)."""
    if not path:
        return None
    if safe_image_url(path):
        return path
    return safe_image_url(f"{base_url.rstrip('/')}/{quote(path.lstrip('/'))}")
