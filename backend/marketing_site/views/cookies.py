# marketing_site/views/cookies.py
import json
from datetime import datetime, timedelta, timezone

from flask import redirect, request

from .urls import safe_next
from . import site_bp

COOKIE_NAME = "cookie-consent"
MAX_AGE = timedelta(days=365)
CATEGORIES = ("necessary", "analytics", "marketing")


def read_consent():
    """The visitor's stored choice, or None when the banner should be shown."""
    raw = request.cookies.get(COOKIE_NAME)
    if not raw:
        return None
    try:
        consent = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(consent, dict) or not all(
        isinstance(consent.get(name), bool) for name in CATEGORIES
    ):
        return None
    return consent


def build_consent(action, form):
    if action == "accept_all":
        analytics = marketing = True
    elif action == "reject_all":
        analytics = marketing = False
    elif action == "save":
        analytics = form.get("analytics") == "on"
        marketing = form.get("marketing") == "on"
    else:
        return None

    return {
        "necessary": True,
        "analytics": analytics,
        "marketing": marketing,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@site_bp.route("/cookie-consent", methods=["POST"])
def save_cookie_consent():
    response = redirect(safe_next(request.form.get("next")))

    consent = build_consent(request.form.get("action"), request.form)
    if consent is None:
        return response

    response.set_cookie(
        COOKIE_NAME,
        json.dumps(consent, separators=(",", ":")),
        max_age=int(MAX_AGE.total_seconds()),
        samesite="Lax",
        secure=request.is_secure,
    )
    return response


@site_bp.app_context_processor
def inject_cookie_consent():
    return {"cookie_consent": read_consent()}
