from urllib.parse import urlparse


def safe_next(target, default="/"):
    """Only allow redirects to paths on this site."""
    if not target:
        return default
    parsed = urlparse(target)
    if parsed.scheme or parsed.netloc or not target.startswith("/") or target.startswith("//"):
        return default
    return target
