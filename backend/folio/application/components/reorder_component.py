import logging

from folio.application.lookups import lock_component_scope
from folio.models.component import Component
from folio.utils.audit import log_action
from folio.utils.order import apply_reorder, assert_scope_contiguous
from folio.utils.transaction import transactional

logger = logging.getLogger(__name__)


def reorder_component(session, *, user_id: str, component_id: str, position: int) -> Component:
    """Moves a component to ``position`` within its section."""
    with transactional(session):
        component = lock_component_scope(session, user_id=user_id, component_id=component_id)
        previous = component.position

        if apply_reorder(session, component, position):
            assert_scope_contiguous(session, Component, component.section_id)

            log_action(
                session,
                actor_id=user_id,
                action="component.reorder",
                entity_type="component",
                entity_id=component.id,
                payload={"from": previous, "to": position},
            )
            logger.info("Moved component %s from %d to %d", component.id, previous, position)

    return component
