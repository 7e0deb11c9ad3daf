from sqlalchemy import func, select

from folio.domain.guards import check_capacity
from folio.models.component import Component
from folio.models.section import Section
from folio.utils.order import count_in_scope

SECTION_SCOPE = "section"
PORTFOLIO_SCOPE = "portfolio"
LIMIT_SCOPES = (SECTION_SCOPE, PORTFOLIO_SCOPE)


def count_components(session, section: Section, limit_scope: str) -> int:
    if limit_scope == PORTFOLIO_SCOPE:
        stmt = (
            select(func.count(Component.id))
            .join(Section, Component.section_id == Section.id)
            .where(Section.portfolio_id == section.portfolio_id)
        )
        return session.scalar(stmt) or 0
    return count_in_scope(session, Component, section.id)


def check_component_capacity(
    session,
    section: Section,
    *,
    limit_scope: str,
    maximum: int,
    requested: int = 1,
) -> None:
    """
    Components are capped either per section or across the whole portfolio,
    depending on ``limit_scope``. The caller holds the matching lock.
    """
    if limit_scope not in LIMIT_SCOPES:
        raise ValueError(f"Unknown component limit scope: {limit_scope}")

    check_capacity(
        kind="component",
        scope=limit_scope,
        current_count=count_components(session, section, limit_scope),
        maximum=maximum,
        requested=requested,
    )
