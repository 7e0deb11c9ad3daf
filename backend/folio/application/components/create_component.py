import logging
from typing import Sequence

from folio.application.components.capacity import SECTION_SCOPE, PORTFOLIO_SCOPE, check_component_capacity
from folio.application.lookups import lock_component_parent
from folio.domain.guards import MAX_COMPONENTS_PER_SCOPE
from folio.domain.positions import next_position
from folio.models.component import Component
from folio.utils.audit import log_action
from folio.utils.order import assert_scope_contiguous, count_in_scope
from folio.utils.transaction import transactional

logger = logging.getLogger(__name__)


def create_components(
    session,
    *,
    user_id: str,
    section_id: str,
    commands: Sequence,
    max_components: int = MAX_COMPONENTS_PER_SCOPE,
    limit_scope: str = SECTION_SCOPE,
) -> list[Component]:
    """
    Appends one or more validated components to the end of a section.

    The batch is all-or-nothing: either every component fits under the
    limit and is appended in order, or nothing is written.
    """
    if not commands:
        return []

    with transactional(session):
        section = lock_component_parent(
            session,
            user_id=user_id,
            section_id=section_id,
            include_portfolio=limit_scope == PORTFOLIO_SCOPE,
        )

        check_component_capacity(
            session,
            section,
            limit_scope=limit_scope,
            maximum=max_components,
            requested=len(commands),
        )

        start = next_position(count_in_scope(session, Component, section.id))
        created: list[Component] = []

        for offset, command in enumerate(commands):
            component = Component()
            component.section_id = section.id
            component.type = command.type
            component.data = command.dump_data()
            component.position = start + offset

            session.add(component)
            created.append(component)

        session.flush()  # ensures component ids exist
        assert_scope_contiguous(session, Component, section.id)

        for component in created:
            log_action(
                session,
                actor_id=user_id,
                action="component.create",
                entity_type="component",
                entity_id=component.id,
                payload={
                    "section_id": section.id,
                    "type": component.type,
                    "position": component.position,
                },
            )

    logger.info("Created %d component(s) in section %s from position %d", len(created), section_id, start)
    return created


def create_component(session, *, command, **kwargs) -> Component:
    return create_components(session, commands=[command], **kwargs)[0]
