# marketing_site/notifications/email.py
from __future__ import annotations

from typing import NamedTuple, Optional

import requests
from flask import current_app

RESEND_URL = "https://api.resend.com/emails"


class EmailResult(NamedTuple):
    success: bool
    error: Optional[str] = None
    skipped: bool = False


def send_email(*, to: str, from_address: str, reply_to: str, subject: str, html: str) -> EmailResult:
    """
    Send one transactional email.

    Never raises: delivery problems come back as a failed EmailResult so the
    caller can record them and carry on.
    """
    api_key = current_app.config.get("RESEND_API_KEY")
    if not api_key:
        current_app.logger.info("RESEND_API_KEY not configured, skipping email to %s", to)
        return EmailResult(success=False, error="Email delivery not configured", skipped=True)

    try:
        response = requests.post(
            RESEND_URL,
            headers={"Authorization": f"Bearer {api_key}"},
            json={
                "from": from_address,
                "to": [to],
                "reply_to": reply_to,
                "subject": subject,
                "html": html,
            },
            timeout=current_app.config.get("EMAIL_TIMEOUT", 10),
        )
    except requests.RequestException as exc:
        current_app.logger.error("Email delivery failed: %s", exc)
        return EmailResult(success=False, error=str(exc))

    if response.status_code >= 400:
        error = f"Email API returned {response.status_code}: {response.text[:200]}"
        current_app.logger.error(error)
        return EmailResult(success=False, error=error)

    return EmailResult(success=True)
