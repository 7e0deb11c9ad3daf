import uuid

import pytest
from flask_jwt_extended import create_access_token

from folio import create_app
from folio.domain.positions import plan_removal, plan_reorder
from folio.extensions import db

API = "/api/v1"

TEXT_COMPONENT = {"type": "text", "data": {"content": "Hello there"}}


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_headers(app):
    def make(user_id):
        with app.app_context():
            token = create_access_token(identity=user_id)
        return {"Authorization": f"Bearer {token}"}

    return make


@pytest.fixture
def user_id():
    return str(uuid.uuid4())


@pytest.fixture
def headers(make_headers, user_id):
    return make_headers(user_id)


@pytest.fixture
def other_headers(make_headers):
    return make_headers(str(uuid.uuid4()))


@pytest.fixture
def portfolio(client, headers):
    """A fresh portfolio; it starts without sections."""
    resp = client.post(f"{API}/portfolios", json={"title": "Jane Doe"}, headers=headers)
    assert resp.status_code == 201
    return resp.get_json()["data"]


@pytest.fixture
def add_section(client, headers):
    def add(portfolio_id, name, **fields):
        return client.post(
            f"{API}/portfolios/{portfolio_id}/sections",
            json={"name": name, **fields},
            headers=headers,
        )

    return add


@pytest.fixture
def about(portfolio, add_section):
    """First section of the portfolio, at position 0."""
    resp = add_section(portfolio["id"], "About")
    assert resp.status_code == 201
    return resp.get_json()["data"]


@pytest.fixture
def add_component(client, headers):
    def add(section_id, payload=None):
        return client.post(
            f"{API}/sections/{section_id}/components",
            json=payload or TEXT_COMPONENT,
            headers=headers,
        )

    return add


@pytest.fixture
def list_sections(client, headers):
    """Sections of a portfolio in position order."""

    def fetch(portfolio_id):
        resp = client.get(f"{API}/portfolios/{portfolio_id}/sections?per_page=100", headers=headers)
        assert resp.status_code == 200
        return resp.get_json()["data"]

    return fetch


@pytest.fixture
def list_components(client, headers):
    def fetch(section_id, **params):
        resp = client.get(
            f"{API}/sections/{section_id}/components",
            query_string={"per_page": 100, **params},
            headers=headers,
        )
        assert resp.status_code == 200
        return resp.get_json()["data"]

    return fetch


# -------------------------------------------------
# In-memory model of a scope: {id: position}
# -------------------------------------------------
def reorder_positions(positions, entity_id, target):
    current = positions[entity_id]
    shift = plan_reorder(current, target, len(positions))
    if shift is None:
        return dict(positions)

    moved = {key: shift.apply(pos) for key, pos in positions.items() if key != entity_id}
    moved[entity_id] = target
    return moved


def remove_position(positions, entity_id):
    shift = plan_removal(positions[entity_id])
    return {key: shift.apply(pos) for key, pos in positions.items() if key != entity_id}
