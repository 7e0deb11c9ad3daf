"""
Ownership-scoped loaders.

Every lookup is keyed by the authenticated user id, so an entity owned by
someone else is indistinguishable from a missing one (404, never 403).
The ``lock_*`` variants take a row lock on the parent scope before re-reading
the entity, which serializes position mutations within that scope.
SQLite ignores ``FOR UPDATE``; there the engine opens every transaction with
``BEGIN IMMEDIATE`` instead (see ``folio.utils.sqlite``).
"""
from sqlalchemy import select

from folio.domain.exceptions import NotFound
from folio.models.component import Component
from folio.models.portfolio import Portfolio
from folio.models.section import Section


def _locked(session, model, row_id):
    stmt = (
        select(model)
        .where(model.id == row_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )
    return session.scalar(stmt)


def _reloaded(session, model, row_id):
    stmt = select(model).where(model.id == row_id).execution_options(populate_existing=True)
    return session.scalar(stmt)


def find_portfolio(session, *, user_id: str, portfolio_id: str) -> Portfolio:
    portfolio = session.scalar(
        select(Portfolio).where(Portfolio.id == portfolio_id, Portfolio.user_id == user_id)
    )
    if portfolio is None:
        raise NotFound.portfolio(portfolio_id)
    return portfolio


def find_user_portfolio(session, *, user_id: str) -> Portfolio:
    portfolio = session.scalar(select(Portfolio).where(Portfolio.user_id == user_id))
    if portfolio is None:
        raise NotFound("Portfolio not found or access denied", code="PORTFOLIO_NOT_FOUND")
    return portfolio


def find_section(session, *, user_id: str, section_id: str) -> Section:
    section = session.scalar(
        select(Section)
        .join(Portfolio, Section.portfolio_id == Portfolio.id)
        .where(Section.id == section_id, Portfolio.user_id == user_id)
    )
    if section is None:
        raise NotFound.section(section_id)
    return section


def find_component(session, *, user_id: str, component_id: str) -> Component:
    component = session.scalar(
        select(Component)
        .join(Section, Component.section_id == Section.id)
        .join(Portfolio, Section.portfolio_id == Portfolio.id)
        .where(Component.id == component_id, Portfolio.user_id == user_id)
    )
    if component is None:
        raise NotFound.component(component_id)
    return component


def lock_portfolio(session, *, user_id: str, portfolio_id: str) -> Portfolio:
    portfolio = _locked(session, Portfolio, portfolio_id)
    if portfolio is None or portfolio.user_id != user_id:
        raise NotFound.portfolio(portfolio_id)
    return portfolio


def lock_section_scope(session, *, user_id: str, section_id: str) -> tuple[Section, Portfolio]:
    """Locks the portfolio owning ``section_id`` and returns the fresh section."""
    section = find_section(session, user_id=user_id, section_id=section_id)
    portfolio = lock_portfolio(session, user_id=user_id, portfolio_id=section.portfolio_id)

    section = _reloaded(session, Section, section_id)
    if section is None:
        raise NotFound.section(section_id)
    return section, portfolio


def lock_component_parent(
    session,
    *,
    user_id: str,
    section_id: str,
    include_portfolio: bool = False,
) -> Section:
    """
    Locks a section as the scope for component mutations. With
    ``include_portfolio`` the owning portfolio is locked first, for limits
    that span the whole portfolio.
    """
    section = find_section(session, user_id=user_id, section_id=section_id)
    if include_portfolio:
        lock_portfolio(session, user_id=user_id, portfolio_id=section.portfolio_id)

    section = _locked(session, Section, section_id)
    if section is None:
        raise NotFound.section(section_id)
    return section


def lock_component_scope(session, *, user_id: str, component_id: str) -> Component:
    """Locks the section owning ``component_id`` and returns the fresh component."""
    component = find_component(session, user_id=user_id, component_id=component_id)
    lock_component_parent(session, user_id=user_id, section_id=component.section_id)

    component = _reloaded(session, Component, component_id)
    if component is None:
        raise NotFound.component(component_id)
    return component
