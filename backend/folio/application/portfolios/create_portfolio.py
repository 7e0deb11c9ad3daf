import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from folio.domain.exceptions import Conflict
from folio.models.portfolio import Portfolio
from folio.schemas.portfolios import CreatePortfolioCommand
from folio.utils.audit import log_action
from folio.utils.transaction import transactional

logger = logging.getLogger(__name__)


def create_portfolio(session, *, user_id: str, command: CreatePortfolioCommand) -> Portfolio:
    """
    Create the user's portfolio in the unpublished state.

    Edge cases handled:
    - One portfolio per user (pre-check plus unique constraint)
    """
    with transactional(session):
        existing = session.scalar(select(Portfolio.id).where(Portfolio.user_id == user_id))
        if existing:
            raise Conflict(
                "Portfolio already exists for this user",
                code="PORTFOLIO_EXISTS",
                details={"portfolio_id": existing},
            )

        portfolio = Portfolio()
        portfolio.user_id = user_id
        portfolio.title = command.title
        portfolio.description = command.description
        portfolio.is_published = False

        session.add(portfolio)
        try:
            session.flush()  # ensures portfolio.id is available
        except IntegrityError as exc:
            # a concurrent request created it first
            raise Conflict(
                "Portfolio already exists for this user",
                code="PORTFOLIO_EXISTS",
            ) from exc

        log_action(
            session,
            actor_id=user_id,
            action="portfolio.create",
            entity_type="portfolio",
            entity_id=portfolio.id,
            payload={"title": portfolio.title},
        )

    logger.info("Created portfolio %s for user %s", portfolio.id, user_id)
    return portfolio
