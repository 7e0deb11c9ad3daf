import logging

from .exceptions import CannotDeleteLastRequired, LimitReached

logger = logging.getLogger(__name__)

MAX_SECTIONS_PER_PORTFOLIO = 10
MAX_COMPONENTS_PER_SCOPE = 15

LIMIT_CODES = {
    "section": "SECTION_LIMIT_REACHED",
    "component": "COMPONENT_LIMIT_REACHED",
}


def check_capacity(
    *,
    kind: str,
    scope: str,
    current_count: int,
    maximum: int,
    requested: int = 1,
) -> None:
    """
    Rejects an insert of ``requested`` children of ``kind`` into a scope that
    already holds ``current_count`` when it would exceed ``maximum``.

    The count must be read under the scope lock, immediately before the insert.
    """
    if current_count + requested <= maximum:
        return

    logger.info(
        "Capacity guard rejected %s insert: %s holds %d of %d, requested %d",
        kind, scope, current_count, maximum, requested,
    )
    raise LimitReached(
        f"Maximum of {maximum} {kind}s allowed per {scope}",
        code=LIMIT_CODES[kind],
        details={
            "current_count": current_count,
            "requested_count": requested,
            "max_allowed": maximum,
        },
    )


def assert_section_deletable(*, portfolio, section_count: int) -> None:
    """
    An unpublished portfolio must keep at least one section so a first
    publish has content. Published portfolios are not protected.
    """
    if portfolio.is_published or section_count > 1:
        return

    logger.info(
        "Deletion guard rejected removal of last section of unpublished portfolio %s",
        portfolio.id,
    )
    raise CannotDeleteLastRequired(
        details={"portfolio_id": portfolio.id, "section_count": section_count},
    )
