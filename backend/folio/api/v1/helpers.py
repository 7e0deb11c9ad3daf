from flask import current_app, request

from folio.domain.exceptions import InvalidJson
from folio.utils.optimistic_lock import parse_unmodified_since


def json_body():
    """Parsed JSON request body; a missing or malformed body, or a bare scalar, is rejected."""
    data = request.get_json(silent=True)
    if not isinstance(data, (dict, list)):
        raise InvalidJson()
    return data


def optional_json_body() -> dict:
    """Like ``json_body`` for routes whose fields all have defaults: no body means ``{}``."""
    if not request.get_data(cache=True):
        return {}
    return json_body()


def unmodified_since():
    return parse_unmodified_since(request.headers.get("If-Unmodified-Since"))


def section_limits() -> dict:
    return {"max_sections": current_app.config["MAX_SECTIONS_PER_PORTFOLIO"]}


def component_limits() -> dict:
    return {
        "max_components": current_app.config["MAX_COMPONENTS_PER_SCOPE"],
        "limit_scope": current_app.config["COMPONENT_LIMIT_SCOPE"],
    }
