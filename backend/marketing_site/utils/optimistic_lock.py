from datetime import timezone

from dateutil.parser import parse
from flask import abort, request


def to_utc(value):
    """Parse an HTTP or ISO timestamp; naive values are taken as UTC."""
    ts = parse(value)
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def enforce_optimistic_lock(document):
    """
    Reject the request with 409 when the CMS document changed after the
    editor's If-Unmodified-Since timestamp. No header, no check.
    """
    header = request.headers.get("If-Unmodified-Since")
    updated_at = document.get("_updatedAt")
    if not header or not updated_at:
        return

    try:
        client_ts = to_utc(header)
    except (ValueError, OverflowError):
        abort(400, description="Invalid If-Unmodified-Since header")

    if to_utc(updated_at) > client_ts:
        abort(409, description=f"Document {document.get('_id')} has been modified since {header}")
