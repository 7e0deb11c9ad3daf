from .component import _iso
from .section import normalize_section


def normalize_publish_state(portfolio):
    return {
        "is_published": portfolio.is_published,
        "published_at": _iso(portfolio.published_at),
    }


def normalize_portfolio(portfolio, include_sections=False):
    data = {
        "id": portfolio.id,
        "title": portfolio.title,
        "description": portfolio.description,
        **normalize_publish_state(portfolio),
        "created_at": _iso(portfolio.created_at),
        "updated_at": _iso(portfolio.updated_at),
    }

    if include_sections:
        sections = sorted(portfolio.sections, key=lambda s: s.position)
        data["sections"] = [
            normalize_section(s, include_components=True)
            for s in sections
        ]

    return data
