# folio/normalizers/pagination.py
from typing import Callable, Any, List, Dict


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    page: int,
    per_page: int,
    total: int,
) -> Dict[str, Any]:
    """
    Normalize offset-paginated API responses into the ``data``/``meta`` envelope.
    """

    return {
        "data": [normalize_fn(item) for item in items],
        "meta": {
            "page": page,
            "per_page": per_page,
            "total": total,
            "total_pages": (total + per_page - 1) // per_page,
        },
    }
