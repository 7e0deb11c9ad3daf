# folio/api/v1/portfolios.py
from flask import g, jsonify, request

from folio.application.lookups import find_portfolio, find_user_portfolio
from folio.application.portfolios.create_portfolio import create_portfolio
from folio.application.portfolios.publish_portfolio import publish_portfolio, unpublish_portfolio
from folio.application.portfolios.update_portfolio import update_portfolio
from folio.application.sections.create_section import create_section
from folio.application.sections.list_sections import list_sections
from folio.extensions import db
from folio.normalizers.pagination import normalize_pagination
from folio.normalizers.portfolio import normalize_portfolio, normalize_publish_state
from folio.normalizers.section import normalize_section
from folio.schemas.base import validate_payload
from folio.schemas.portfolios import CreatePortfolioCommand, UpdatePortfolioCommand
from folio.schemas.sections import CreateSectionCommand, SectionListQuery
from folio.utils.decorators import user_required
from .helpers import json_body, optional_json_body, section_limits, unmodified_since
from . import v1_bp


# ------------------------
# Portfolios
# ------------------------
@v1_bp.route("/portfolios", methods=["POST"])
@user_required
def create_portfolio_route():
    command = validate_payload(CreatePortfolioCommand, optional_json_body())

    portfolio = create_portfolio(db.session, user_id=g.current_user_id, command=command)

    return jsonify({"data": normalize_portfolio(portfolio, include_sections=True)}), 201


@v1_bp.route("/portfolios/me", methods=["GET"])
@user_required
def get_my_portfolio():
    portfolio = find_user_portfolio(db.session, user_id=g.current_user_id)
    return jsonify({"data": normalize_portfolio(portfolio)})


@v1_bp.route("/portfolios/<uuid:portfolio_id>", methods=["GET"])
@user_required
def get_portfolio(portfolio_id):
    portfolio = find_portfolio(db.session, user_id=g.current_user_id, portfolio_id=str(portfolio_id))
    return jsonify({"data": normalize_portfolio(portfolio, include_sections=True)})


@v1_bp.route("/portfolios/<uuid:portfolio_id>", methods=["PATCH"])
@user_required
def update_portfolio_route(portfolio_id):
    command = validate_payload(UpdatePortfolioCommand, json_body())

    portfolio = update_portfolio(
        db.session,
        user_id=g.current_user_id,
        portfolio_id=str(portfolio_id),
        command=command,
        unmodified_since=unmodified_since(),
    )

    return jsonify({"data": normalize_portfolio(portfolio)})


@v1_bp.route("/portfolios/<uuid:portfolio_id>/publish", methods=["POST"])
@user_required
def publish_portfolio_route(portfolio_id):
    portfolio = publish_portfolio(db.session, user_id=g.current_user_id, portfolio_id=str(portfolio_id))
    return jsonify({"data": normalize_publish_state(portfolio)})


@v1_bp.route("/portfolios/<uuid:portfolio_id>/unpublish", methods=["POST"])
@user_required
def unpublish_portfolio_route(portfolio_id):
    portfolio = unpublish_portfolio(db.session, user_id=g.current_user_id, portfolio_id=str(portfolio_id))
    return jsonify({"data": normalize_publish_state(portfolio)})


# ------------------------
# Sections of a portfolio
# ------------------------
@v1_bp.route("/portfolios/<uuid:portfolio_id>/sections", methods=["POST"])
@user_required
def create_section_route(portfolio_id):
    command = validate_payload(CreateSectionCommand, json_body())

    section = create_section(
        db.session,
        user_id=g.current_user_id,
        portfolio_id=str(portfolio_id),
        command=command,
        **section_limits(),
    )

    return jsonify({"data": normalize_section(section)}), 201


@v1_bp.route("/portfolios/<uuid:portfolio_id>/sections", methods=["GET"])
@user_required
def list_sections_route(portfolio_id):
    query = validate_payload(SectionListQuery, request.args.to_dict(), "Invalid query parameters")

    sections, total = list_sections(
        db.session,
        user_id=g.current_user_id,
        portfolio_id=str(portfolio_id),
        query=query,
    )

    return jsonify(
        normalize_pagination(
            sections,
            normalize_section,
            page=query.page,
            per_page=query.per_page,
            total=total,
        )
    )
