from datetime import datetime
from typing import Optional

from folio.application.lookups import find_portfolio
from folio.models.portfolio import Portfolio
from folio.schemas.portfolios import UpdatePortfolioCommand
from folio.utils.audit import log_action
from folio.utils.optimistic_lock import enforce_optimistic_lock
from folio.utils.transaction import transactional


def update_portfolio(
    session,
    *,
    user_id: str,
    portfolio_id: str,
    command: UpdatePortfolioCommand,
    unmodified_since: Optional[datetime] = None,
) -> Portfolio:
    """Updates title and/or description. Publication state has its own routes."""
    with transactional(session):
        portfolio = find_portfolio(session, user_id=user_id, portfolio_id=portfolio_id)
        enforce_optimistic_lock(portfolio, unmodified_since)

        changed_fields: list[str] = []
        for field, value in command.changes().items():
            if getattr(portfolio, field) != value:
                setattr(portfolio, field, value)
                changed_fields.append(field)

        if changed_fields:
            log_action(
                session,
                actor_id=user_id,
                action="portfolio.update",
                entity_type="portfolio",
                entity_id=portfolio.id,
                payload={"fields": changed_fields},
            )

    return portfolio
