import logging

from folio.application.lookups import lock_portfolio
from folio.domain.guards import MAX_SECTIONS_PER_PORTFOLIO, check_capacity
from folio.domain.positions import next_position
from folio.models.section import Section
from folio.schemas.sections import CreateSectionCommand
from folio.utils.audit import log_action
from folio.utils.order import assert_scope_contiguous, count_in_scope
from folio.utils.transaction import transactional

logger = logging.getLogger(__name__)


def create_section(
    session,
    *,
    user_id: str,
    portfolio_id: str,
    command: CreateSectionCommand,
    max_sections: int = MAX_SECTIONS_PER_PORTFOLIO,
) -> Section:
    """
    Appends a new section to the end of a portfolio.

    Responsibilities:
    - Capacity check under the portfolio lock
    - Append position allocation
    - Audit logging
    """
    with transactional(session):
        portfolio = lock_portfolio(session, user_id=user_id, portfolio_id=portfolio_id)

        current_count = count_in_scope(session, Section, portfolio.id)
        check_capacity(
            kind="section",
            scope="portfolio",
            current_count=current_count,
            maximum=max_sections,
        )

        section = Section()
        section.portfolio_id = portfolio.id
        section.name = command.name
        section.visible = command.visible
        section.position = next_position(current_count)

        session.add(section)
        session.flush()  # ensures section.id exists

        assert_scope_contiguous(session, Section, portfolio.id)

        log_action(
            session,
            actor_id=user_id,
            action="section.create",
            entity_type="section",
            entity_id=section.id,
            payload={
                "portfolio_id": portfolio.id,
                "position": section.position,
            },
        )

    logger.info("Created section %s at position %d in portfolio %s", section.id, section.position, portfolio_id)
    return section
