# marketing_site/models/contact_submission.py
from marketing_site.extensions import db
from .base import BaseModel

EMAIL_STATUSES = ("pending", "sent", "failed", "skipped")


class ContactSubmission(BaseModel):
    __tablename__ = "contact_submissions"

    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(320), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)

    phone = db.Column(db.String(50), nullable=True)
    company = db.Column(db.String(200), nullable=True)
    request_type = db.Column(db.String(100), nullable=True)
    subject = db.Column(db.String(300), nullable=True)

    # Delivery of the notification email is tracked apart from receipt
    email_status = db.Column(db.String(20), nullable=False, default="pending", index=True)
    email_error = db.Column(db.String(500), nullable=True)
