from typing import Optional
from folio.models.audit_log import AuditLog


def log_action(
    session,
    *,
    actor_id: str,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """Appends an audit row to the caller's transaction."""
    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    session.add(log)
