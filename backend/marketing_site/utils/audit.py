from flask import g
from marketing_site.extensions import db
from marketing_site.models.audit_log import AuditLog
from typing import Optional


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None,
    actor_id: Optional[str] = None,
):
    actor_id = actor_id or getattr(g, "editor_id", None)
    if not actor_id:
        return  # Skip logging outside an editor session
    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
