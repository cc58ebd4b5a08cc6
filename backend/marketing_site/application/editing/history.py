# marketing_site/application/editing/history.py
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from marketing_site.utils.audit import log_action
from marketing_site.utils.transaction import transactional


def record_section_edit(*, action, document_id, payload, actor_id):
    """
    Write the audit row for an edit the CMS has already applied.

    The document has changed by now, so a failed write is logged and the
    editor still gets the outcome.
    """
    try:
        with transactional():
            log_action(
                action=action,
                entity_type="page",
                entity_id=document_id,
                payload=payload,
                actor_id=actor_id,
            )
    except SQLAlchemyError:
        current_app.logger.exception("Audit log for %s on %s failed", action, document_id)
