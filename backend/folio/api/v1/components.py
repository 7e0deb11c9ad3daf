# folio/api/v1/components.py
from flask import g, jsonify

from folio.application.components.delete_component import delete_component
from folio.application.components.reorder_component import reorder_component
from folio.application.components.update_component import update_component
from folio.application.lookups import find_component
from folio.extensions import db
from folio.normalizers.component import normalize_component
from folio.schemas.base import validate_payload
from folio.schemas.components import UpdateComponentCommand
from folio.schemas.sections import ReorderCommand
from folio.utils.decorators import user_required
from .helpers import json_body, unmodified_since
from . import v1_bp


@v1_bp.route("/components/<uuid:component_id>", methods=["GET"])
@user_required
def get_component(component_id):
    component = find_component(db.session, user_id=g.current_user_id, component_id=str(component_id))
    return jsonify({"data": normalize_component(component, detailed=True)})


@v1_bp.route("/components/<uuid:component_id>", methods=["PATCH"])
@user_required
def update_component_route(component_id):
    command = validate_payload(UpdateComponentCommand, json_body())

    component = update_component(
        db.session,
        user_id=g.current_user_id,
        component_id=str(component_id),
        data=command.data,
        unmodified_since=unmodified_since(),
    )

    return jsonify({"data": normalize_component(component)})


@v1_bp.route("/components/<uuid:component_id>", methods=["DELETE"])
@user_required
def delete_component_route(component_id):
    delete_component(db.session, user_id=g.current_user_id, component_id=str(component_id))
    return "", 204


@v1_bp.route("/components/<uuid:component_id>/reorder", methods=["POST"])
@user_required
def reorder_component_route(component_id):
    command = validate_payload(ReorderCommand, json_body())

    component = reorder_component(
        db.session,
        user_id=g.current_user_id,
        component_id=str(component_id),
        position=command.position,
    )

    return jsonify({"data": normalize_component(component)})
