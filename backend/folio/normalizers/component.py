def _iso(ts):
    return ts.isoformat() if ts else None


def normalize_component(component, detailed=False):
    base = {
        "id": component.id,
        "type": component.type,
        "position": component.position,
        "data": component.data or {},
        "updated_at": _iso(component.updated_at),
    }

    if detailed:
        base["section_id"] = component.section_id
        base["created_at"] = _iso(component.created_at)

    return base
