from datetime import datetime
from typing import Any, Optional

from folio.application.lookups import find_component
from folio.models.component import Component
from folio.schemas.components import validate_component_data
from folio.utils.audit import log_action
from folio.utils.optimistic_lock import enforce_optimistic_lock
from folio.utils.transaction import transactional


def update_component(
    session,
    *,
    user_id: str,
    component_id: str,
    data: Any,
    unmodified_since: Optional[datetime] = None,
) -> Component:
    """
    Replaces a component's data. The payload must match the component's
    stored type; the type itself cannot change.
    """
    with transactional(session):
        component = find_component(session, user_id=user_id, component_id=component_id)
        enforce_optimistic_lock(component, unmodified_since)

        normalized = validate_component_data(component.type, data)

        if normalized != component.data:
            component.data = normalized

            log_action(
                session,
                actor_id=user_id,
                action="component.update",
                entity_type="component",
                entity_id=component.id,
                payload={"type": component.type},
            )

    return component
