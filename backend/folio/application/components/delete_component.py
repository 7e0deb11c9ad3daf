import logging

from folio.application.lookups import lock_component_scope
from folio.models.component import Component
from folio.utils.audit import log_action
from folio.utils.order import assert_scope_contiguous, close_gap
from folio.utils.transaction import transactional

logger = logging.getLogger(__name__)


def delete_component(session, *, user_id: str, component_id: str) -> None:
    """
    Deletes a component and moves every later sibling up one slot.
    Sections may be emptied of components at any time.
    """
    with transactional(session):
        component = lock_component_scope(session, user_id=user_id, component_id=component_id)

        section_id = component.section_id
        removed_position = component.position

        session.delete(component)
        session.flush()

        close_gap(session, Component, section_id, removed_position)
        assert_scope_contiguous(session, Component, section_id)

        log_action(
            session,
            actor_id=user_id,
            action="component.delete",
            entity_type="component",
            entity_id=component_id,
            payload={
                "section_id": section_id,
                "position": removed_position,
            },
        )

    logger.info("Deleted component %s from position %d in section %s", component_id, removed_position, section_id)
