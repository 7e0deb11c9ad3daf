import logging

from folio.application.lookups import lock_section_scope
from folio.models.section import Section
from folio.utils.audit import log_action
from folio.utils.order import apply_reorder, assert_scope_contiguous
from folio.utils.transaction import transactional

logger = logging.getLogger(__name__)


def reorder_section(session, *, user_id: str, section_id: str, position: int) -> Section:
    """
    Moves a section to ``position`` within its portfolio.

    The requested slot is re-validated against the current section count;
    a request for the current slot changes nothing.
    """
    with transactional(session):
        section, portfolio = lock_section_scope(session, user_id=user_id, section_id=section_id)
        previous = section.position

        if apply_reorder(session, section, position):
            assert_scope_contiguous(session, Section, portfolio.id)

            log_action(
                session,
                actor_id=user_id,
                action="section.reorder",
                entity_type="section",
                entity_id=section.id,
                payload={"from": previous, "to": position},
            )
            logger.info("Moved section %s from %d to %d", section.id, previous, position)

    return section
