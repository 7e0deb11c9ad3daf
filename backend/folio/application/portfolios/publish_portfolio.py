# folio/application/portfolios/publish_portfolio.py
import logging

from sqlalchemy import func, select

from folio.application.lookups import lock_portfolio
from folio.domain.invariants.portfolio import assert_publishable
from folio.models.base import utcnow
from folio.models.component import Component
from folio.models.portfolio import Portfolio
from folio.models.section import Section
from folio.utils.audit import log_action
from folio.utils.order import count_in_scope
from folio.utils.transaction import transactional

logger = logging.getLogger(__name__)


def publish_portfolio(session, *, user_id: str, portfolio_id: str) -> Portfolio:
    """
    Marks a portfolio as published. Publishing an already published
    portfolio returns it unchanged.

    Responsibilities:
    - transactional boundary with the portfolio row locked
    - publish requirements (at least one section and one component)
    - audit logging
    """
    with transactional(session):
        portfolio = lock_portfolio(session, user_id=user_id, portfolio_id=portfolio_id)

        if portfolio.is_published:
            return portfolio

        component_count = session.scalar(
            select(func.count(Component.id))
            .join(Section, Component.section_id == Section.id)
            .where(Section.portfolio_id == portfolio.id)
        ) or 0

        assert_publishable(
            section_count=count_in_scope(session, Section, portfolio.id),
            component_count=component_count,
        )

        portfolio.is_published = True
        portfolio.published_at = utcnow()

        log_action(
            session,
            actor_id=user_id,
            action="portfolio.publish",
            entity_type="portfolio",
            entity_id=portfolio.id,
            payload={"components": component_count},
        )

    logger.info("Published portfolio %s", portfolio_id)
    return portfolio


def unpublish_portfolio(session, *, user_id: str, portfolio_id: str) -> Portfolio:
    """Returns a portfolio to the unpublished state; a no-op if it already is."""
    with transactional(session):
        portfolio = lock_portfolio(session, user_id=user_id, portfolio_id=portfolio_id)

        if not portfolio.is_published:
            return portfolio

        portfolio.is_published = False
        portfolio.published_at = None

        log_action(
            session,
            actor_id=user_id,
            action="portfolio.unpublish",
            entity_type="portfolio",
            entity_id=portfolio.id,
            payload={},
        )

    logger.info("Unpublished portfolio %s", portfolio_id)
    return portfolio
