import json

from sqlalchemy import select

from folio.application.lookups import find_section
from folio.models.component import Component
from folio.schemas.components import ComponentListQuery

SORT_COLUMNS = {
    "position": Component.position,
    "created_at": Component.created_at,
}


def _matches(component: Component, needle: str) -> bool:
    return needle in json.dumps(component.data or {}, ensure_ascii=False).lower()


def list_components(session, *, user_id: str, section_id: str, query: ComponentListQuery):
    """
    Returns one page of a section's components plus the filtered total.

    ``type`` narrows by component type; ``q`` is a case-insensitive search
    over the serialized data. Sections hold few components, so the search
    runs in memory.
    """
    section = find_section(session, user_id=user_id, section_id=section_id)

    column = SORT_COLUMNS[query.sort]
    ordering = column.asc() if query.order == "asc" else column.desc()

    stmt = select(Component).where(Component.section_id == section.id)
    if query.type is not None:
        stmt = stmt.where(Component.type == query.type.value)

    components = list(session.scalars(stmt.order_by(ordering, Component.position.asc())))

    needle = (query.q or "").strip().lower()
    if needle:
        components = [c for c in components if _matches(c, needle)]

    offset = (query.page - 1) * query.per_page
    return components[offset:offset + query.per_page], len(components)
