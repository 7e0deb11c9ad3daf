import pytest

from conftest import API, TEXT_COMPONENT
from folio.extensions import db
from folio.models.audit_log import AuditLog


def audit_actions(app):
    with app.app_context():
        return [
            log.action
            for log in db.session.scalars(db.select(AuditLog).order_by(AuditLog.created_at))
        ]


def test_new_portfolio_starts_unpublished_and_empty(portfolio):
    assert portfolio["title"] == "Jane Doe"
    assert portfolio["is_published"] is False
    assert portfolio["published_at"] is None
    assert portfolio["sections"] == []


def test_portfolio_title_defaults(client, headers):
    resp = client.post(f"{API}/portfolios", headers=headers)
    assert resp.status_code == 201
    assert resp.get_json()["data"]["title"] == "My Portfolio"


def test_create_portfolio_rejects_malformed_body(client, headers):
    resp = client.post(f"{API}/portfolios", data="{oops", content_type="application/json", headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "INVALID_JSON"

    resp = client.post(f"{API}/portfolios", json=5, headers=headers)
    assert resp.status_code == 400

    assert client.get(f"{API}/portfolios/me", headers=headers).status_code == 404


def test_one_portfolio_per_user(client, headers, portfolio):
    resp = client.post(f"{API}/portfolios", json={"title": "Second"}, headers=headers)
    assert resp.status_code == 409

    error = resp.get_json()["error"]
    assert error["code"] == "PORTFOLIO_EXISTS"
    assert error["details"]["portfolio_id"] == portfolio["id"]


def test_get_my_portfolio(client, headers, other_headers, portfolio):
    resp = client.get(f"{API}/portfolios/me", headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["id"] == portfolio["id"]

    resp = client.get(f"{API}/portfolios/me", headers=other_headers)
    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "PORTFOLIO_NOT_FOUND"


def test_get_portfolio_nests_sections_in_order(client, headers, portfolio, about, add_section, add_component):
    projects = add_section(portfolio["id"], "Projects").get_json()["data"]
    add_component(projects["id"], TEXT_COMPONENT)

    client.post(f"{API}/sections/{projects['id']}/reorder", json={"position": 0}, headers=headers)

    resp = client.get(f"{API}/portfolios/{portfolio['id']}", headers=headers)
    assert resp.status_code == 200

    sections = resp.get_json()["data"]["sections"]
    assert [s["name"] for s in sections] == ["Projects", "About"]
    assert [s["position"] for s in sections] == [0, 1]
    assert len(sections[0]["components"]) == 1


def test_other_users_cannot_see_portfolio(client, other_headers, portfolio):
    resp = client.get(f"{API}/portfolios/{portfolio['id']}", headers=other_headers)
    assert resp.status_code == 404

    resp = client.post(f"{API}/portfolios/{portfolio['id']}/publish", headers=other_headers)
    assert resp.status_code == 404

    resp = client.patch(f"{API}/portfolios/{portfolio['id']}", json={"title": "Mine"}, headers=other_headers)
    assert resp.status_code == 404


# ------------------------
# Update
# ------------------------
def test_update_portfolio_title_and_description(app, client, headers, portfolio):
    url = f"{API}/portfolios/{portfolio['id']}"

    resp = client.patch(url, json={"title": "  Jane D.  ", "description": "Backend engineer"}, headers=headers)
    assert resp.status_code == 200

    body = resp.get_json()["data"]
    assert body["title"] == "Jane D."
    assert body["description"] == "Backend engineer"
    assert body["is_published"] is False

    resp = client.patch(url, json={"description": None}, headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["description"] is None
    assert resp.get_json()["data"]["title"] == "Jane D."

    assert audit_actions(app) == ["portfolio.create", "portfolio.update", "portfolio.update"]


def test_update_portfolio_without_changes_is_not_audited(app, client, headers, portfolio):
    resp = client.patch(f"{API}/portfolios/{portfolio['id']}", json={"title": "Jane Doe"}, headers=headers)
    assert resp.status_code == 200
    assert audit_actions(app) == ["portfolio.create"]


@pytest.mark.parametrize(
    "payload",
    [{}, {"title": None}, {"title": "   "}, {"title": "x" * 101}, {"is_published": True}],
)
def test_update_portfolio_rejects_invalid_payloads(client, headers, portfolio, payload):
    resp = client.patch(f"{API}/portfolios/{portfolio['id']}", json=payload, headers=headers)
    assert resp.status_code == 422
    assert resp.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_portfolio_honours_if_unmodified_since(client, headers, portfolio):
    url = f"{API}/portfolios/{portfolio['id']}"

    stale = client.patch(url, json={"title": "Late"}, headers={**headers, "If-Unmodified-Since": "2000-01-01T00:00:00Z"})
    assert stale.status_code == 409
    assert stale.get_json()["error"]["code"] == "CONFLICT"

    fresh = client.patch(url, json={"title": "On time"}, headers={**headers, "If-Unmodified-Since": "2999-01-01T00:00:00Z"})
    assert fresh.status_code == 200


# ------------------------
# Publication
# ------------------------
def test_publish_requires_sections_and_components(client, headers, portfolio, add_section):
    url = f"{API}/portfolios/{portfolio['id']}/publish"

    resp = client.post(url, headers=headers)
    assert resp.status_code == 409
    assert resp.get_json()["error"]["code"] == "UNMET_REQUIREMENTS"
    assert resp.get_json()["error"]["details"] == {"section_count": 0}

    add_section(portfolio["id"], "About")

    resp = client.post(url, headers=headers)
    assert resp.status_code == 409
    assert resp.get_json()["error"]["details"] == {"component_count": 0}


def test_publish_and_unpublish_are_idempotent(app, client, headers, portfolio, about, add_component):
    add_component(about["id"])
    url = f"{API}/portfolios/{portfolio['id']}"

    first = client.post(f"{url}/publish", headers=headers)
    assert first.status_code == 200
    state = first.get_json()["data"]
    assert state["is_published"] is True
    assert state["published_at"] is not None

    again = client.post(f"{url}/publish", headers=headers)
    assert again.status_code == 200
    assert again.get_json()["data"] == state

    down = client.post(f"{url}/unpublish", headers=headers)
    assert down.get_json()["data"] == {"is_published": False, "published_at": None}

    assert client.post(f"{url}/unpublish", headers=headers).status_code == 200

    actions = audit_actions(app)
    assert actions.count("portfolio.publish") == 1
    assert actions.count("portfolio.unpublish") == 1


# ------------------------
# Audit
# ------------------------
def test_mutations_are_audited(app, client, headers, user_id, portfolio, about, add_section):
    section = add_section(portfolio["id"], "Projects").get_json()["data"]
    client.post(f"{API}/sections/{section['id']}/reorder", json={"position": 0}, headers=headers)
    client.delete(f"{API}/sections/{section['id']}", headers=headers)

    with app.app_context():
        actors = {log.actor_id for log in db.session.scalars(db.select(AuditLog))}

    assert audit_actions(app) == [
        "portfolio.create",
        "section.create",
        "section.create",
        "section.reorder",
        "section.delete",
    ]
    assert actors == {user_id}


def test_rejected_mutation_leaves_no_audit_row(app, client, headers, about):
    resp = client.delete(f"{API}/sections/{about['id']}", headers=headers)
    assert resp.status_code == 409

    assert audit_actions(app) == ["portfolio.create", "section.create"]


def test_health_needs_no_token(client):
    resp = client.get(f"{API}/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"
    assert resp.get_json()["database"] == "connected"


def test_request_id_is_echoed(client):
    resp = client.get(f"{API}/health", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"

    resp = client.get(f"{API}/health")
    assert resp.headers["X-Request-ID"]


def test_error_envelope_carries_request_id(client, headers):
    resp = client.get(f"{API}/portfolios/me", headers={**headers, "X-Request-ID": "req-42"})
    assert resp.status_code == 404
    assert resp.get_json()["error"]["request_id"] == "req-42"


def test_openapi_document_is_served(client):
    resp = client.get("/openapi/folio.yaml")
    assert resp.status_code == 200
    assert b"openapi: 3.0.3" in resp.data
