from sqlalchemy import func, select

from folio.application.lookups import find_portfolio
from folio.models.section import Section
from folio.schemas.sections import SectionListQuery

SORT_COLUMNS = {
    "position": Section.position,
    "name": Section.name,
    "created_at": Section.created_at,
}


def list_sections(session, *, user_id: str, portfolio_id: str, query: SectionListQuery):
    """Returns one page of a portfolio's sections plus the total count."""
    portfolio = find_portfolio(session, user_id=user_id, portfolio_id=portfolio_id)

    column = SORT_COLUMNS[query.sort]
    ordering = column.asc() if query.order == "asc" else column.desc()

    total = session.scalar(
        select(func.count(Section.id)).where(Section.portfolio_id == portfolio.id)
    ) or 0

    sections = list(
        session.scalars(
            select(Section)
            .where(Section.portfolio_id == portfolio.id)
            .order_by(ordering, Section.position.asc())
            .offset((query.page - 1) * query.per_page)
            .limit(query.per_page)
        )
    )
    return sections, total
