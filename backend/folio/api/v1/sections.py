# folio/api/v1/sections.py
from flask import g, jsonify, request

from folio.application.components.create_component import create_component, create_components
from folio.application.components.list_components import list_components
from folio.application.lookups import find_section
from folio.application.sections.delete_section import delete_section
from folio.application.sections.reorder_section import reorder_section
from folio.application.sections.update_section import update_section
from folio.extensions import db
from folio.normalizers.component import normalize_component
from folio.normalizers.pagination import normalize_pagination
from folio.normalizers.section import normalize_section
from folio.schemas.base import validate_payload
from folio.schemas.components import ComponentListQuery, CreateComponentsBatchCommand, parse_create_command
from folio.schemas.sections import ReorderCommand, UpdateSectionCommand
from folio.utils.decorators import user_required
from .helpers import component_limits, json_body, unmodified_since
from . import v1_bp


# ------------------------
# Sections
# ------------------------
@v1_bp.route("/sections/<uuid:section_id>", methods=["GET"])
@user_required
def get_section(section_id):
    section = find_section(db.session, user_id=g.current_user_id, section_id=str(section_id))
    return jsonify({"data": normalize_section(section, detailed=True, include_components=True)})


@v1_bp.route("/sections/<uuid:section_id>", methods=["PATCH"])
@user_required
def update_section_route(section_id):
    command = validate_payload(UpdateSectionCommand, json_body())

    section = update_section(
        db.session,
        user_id=g.current_user_id,
        section_id=str(section_id),
        command=command,
        unmodified_since=unmodified_since(),
    )

    return jsonify({"data": normalize_section(section)})


@v1_bp.route("/sections/<uuid:section_id>", methods=["DELETE"])
@user_required
def delete_section_route(section_id):
    delete_section(db.session, user_id=g.current_user_id, section_id=str(section_id))
    return "", 204


@v1_bp.route("/sections/<uuid:section_id>/reorder", methods=["POST"])
@user_required
def reorder_section_route(section_id):
    command = validate_payload(ReorderCommand, json_body())

    section = reorder_section(
        db.session,
        user_id=g.current_user_id,
        section_id=str(section_id),
        position=command.position,
    )

    return jsonify({"data": normalize_section(section)})


# ------------------------
# Components of a section
# ------------------------
@v1_bp.route("/sections/<uuid:section_id>/components", methods=["POST"])
@user_required
def create_component_route(section_id):
    command = parse_create_command(json_body())

    component = create_component(
        db.session,
        user_id=g.current_user_id,
        section_id=str(section_id),
        command=command,
        **component_limits(),
    )

    return jsonify({"data": normalize_component(component)}), 201


@v1_bp.route("/sections/<uuid:section_id>/components/batch", methods=["POST"])
@user_required
def create_components_route(section_id):
    batch = validate_payload(CreateComponentsBatchCommand, json_body(), "Invalid component payload")

    components = create_components(
        db.session,
        user_id=g.current_user_id,
        section_id=str(section_id),
        commands=batch.components,
        **component_limits(),
    )

    return jsonify({"data": [normalize_component(c) for c in components]}), 201


@v1_bp.route("/sections/<uuid:section_id>/components", methods=["GET"])
@user_required
def list_components_route(section_id):
    query = validate_payload(ComponentListQuery, request.args.to_dict(), "Invalid query parameters")

    components, total = list_components(
        db.session,
        user_id=g.current_user_id,
        section_id=str(section_id),
        query=query,
    )

    return jsonify(
        normalize_pagination(
            components,
            normalize_component,
            page=query.page,
            per_page=query.per_page,
            total=total,
        )
    )
