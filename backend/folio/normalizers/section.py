from .component import normalize_component, _iso


def normalize_section(section, detailed=False, include_components=False):
    data = {
        "id": section.id,
        "name": section.name,
        "position": section.position,
        "visible": section.visible,
        "updated_at": _iso(section.updated_at),
    }

    if detailed:
        data["portfolio_id"] = section.portfolio_id
        data["created_at"] = _iso(section.created_at)

    if include_components:
        components = sorted(section.components, key=lambda c: c.position)
        data["components"] = [
            normalize_component(c, detailed=detailed) for c in components
        ]

    return data
