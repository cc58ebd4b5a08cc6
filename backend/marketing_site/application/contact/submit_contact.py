# marketing_site/application/contact/submit_contact.py
import re
from typing import Any, Dict

from flask import current_app, render_template

from marketing_site.exceptions import ContactValidationError
from marketing_site.models.contact_submission import ContactSubmission
from marketing_site.notifications.email import send_email
from marketing_site.utils.transaction import transactional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("name", "email", "message")
OPTIONAL_FIELDS = {
    "phone": "phone",
    "company": "company",
    "requestType": "request_type",
    "subject": "subject",
}


def _clean(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _max_length(column):
    return ContactSubmission.__table__.columns[column].type.length


def validate_contact(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ContactValidationError("Invalid request body")

    cleaned = {field: _clean(data.get(field)) for field in REQUIRED_FIELDS}
    if not all(cleaned.values()):
        raise ContactValidationError("Name, email and message are required")

    if not EMAIL_PATTERN.match(cleaned["email"]):
        raise ContactValidationError("Invalid email address")

    for field, column in OPTIONAL_FIELDS.items():
        cleaned[column] = _clean(data.get(field))

    fields = {**{field: field for field in REQUIRED_FIELDS}, **OPTIONAL_FIELDS}
    for field, column in fields.items():
        limit = _max_length(column)
        if limit and cleaned[column] and len(cleaned[column]) > limit:
            raise ContactValidationError(f"{field} must be at most {limit} characters")

    return cleaned


def submit_contact(*, data: Any) -> ContactSubmission:
    """
    Accept a contact form submission.

    Responsibilities:
    - Validate the payload
    - Persist the submission (this is what "received" means)
    - Notify the sales inbox; delivery failures are recorded, never raised
    """
    fields = validate_contact(data)

    submission = ContactSubmission(**fields)
    with transactional() as session:
        session.add(submission)

    config = current_app.config
    result = send_email(
        to=config["CONTACT_EMAIL"],
        from_address=config["CONTACT_FROM"],
        reply_to=submission.email,
        subject=f"[Website contact] {submission.subject or 'New message'}",
        html=render_template("email/contact.html", submission=submission),
    )

    if result.skipped:
        submission.email_status = "skipped"
    elif result.success:
        submission.email_status = "sent"
    else:
        submission.email_status = "failed"
        submission.email_error = (result.error or "")[:500]
        current_app.logger.warning(
            "Contact submission %s stored but email failed: %s", submission.id, result.error
        )

    with transactional() as session:
        session.add(submission)

    current_app.logger.info(
        "Contact submission %s received (email %s)", submission.id, submission.email_status
    )
    return submission
