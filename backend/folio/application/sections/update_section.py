from datetime import datetime
from typing import Optional

from folio.application.lookups import find_section
from folio.models.section import Section
from folio.schemas.sections import UpdateSectionCommand
from folio.utils.audit import log_action
from folio.utils.optimistic_lock import enforce_optimistic_lock
from folio.utils.transaction import transactional


def update_section(
    session,
    *,
    user_id: str,
    section_id: str,
    command: UpdateSectionCommand,
    unmodified_since: Optional[datetime] = None,
) -> Section:
    """
    Updates name and/or visibility. Position is only ever changed by reorder.
    """
    with transactional(session):
        section = find_section(session, user_id=user_id, section_id=section_id)
        enforce_optimistic_lock(section, unmodified_since)

        changed_fields: list[str] = []
        for field, value in command.changes().items():
            if getattr(section, field) != value:
                setattr(section, field, value)
                changed_fields.append(field)

        if changed_fields:
            log_action(
                session,
                actor_id=user_id,
                action="section.update",
                entity_type="section",
                entity_id=section.id,
                payload={"fields": changed_fields},
            )

    return section
