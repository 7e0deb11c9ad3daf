import logging

from folio.application.lookups import lock_section_scope
from folio.domain.guards import assert_section_deletable
from folio.models.section import Section
from folio.utils.audit import log_action
from folio.utils.order import assert_scope_contiguous, close_gap, count_in_scope
from folio.utils.transaction import transactional

logger = logging.getLogger(__name__)


def delete_section(session, *, user_id: str, section_id: str) -> None:
    """
    Deletes a section (and its components) and closes the gap it leaves.

    Notes:
    - Unpublished portfolios must keep at least one section
    - Later sections move up by one, in the same transaction
    """
    with transactional(session):
        section, portfolio = lock_section_scope(session, user_id=user_id, section_id=section_id)

        assert_section_deletable(
            portfolio=portfolio,
            section_count=count_in_scope(session, Section, portfolio.id),
        )

        removed_position = section.position
        session.delete(section)
        session.flush()

        close_gap(session, Section, portfolio.id, removed_position)
        assert_scope_contiguous(session, Section, portfolio.id)

        log_action(
            session,
            actor_id=user_id,
            action="section.delete",
            entity_type="section",
            entity_id=section_id,
            payload={
                "portfolio_id": portfolio.id,
                "position": removed_position,
            },
        )

    logger.info("Deleted section %s from position %d in portfolio %s", section_id, removed_position, portfolio.id)
