from urllib.parse import urlparse


def is_valid_url(value: str) -> bool:
    v = (value or "").strip()
    try:
        parsed = urlparse(v)
        return bool(parsed.scheme in ("http", "https") and parsed.netloc)
    except Exception:
        return False
