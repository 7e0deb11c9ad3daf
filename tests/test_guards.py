from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from folio.domain.exceptions import CannotDeleteLastRequired, Conflict, LimitReached, UnmetRequirements, ValidationFailed
from folio.domain.guards import assert_section_deletable, check_capacity
from folio.domain.invariants.portfolio import assert_publishable
from folio.utils.optimistic_lock import enforce_optimistic_lock, parse_unmodified_since


def test_capacity_allows_up_to_maximum():
    check_capacity(kind="section", scope="portfolio", current_count=9, maximum=10)


def test_capacity_rejects_beyond_maximum():
    with pytest.raises(LimitReached) as exc:
        check_capacity(kind="section", scope="portfolio", current_count=10, maximum=10)

    assert exc.value.code == "SECTION_LIMIT_REACHED"
    assert exc.value.status_code == 409
    assert exc.value.details == {"current_count": 10, "requested_count": 1, "max_allowed": 10}


def test_capacity_counts_whole_batch():
    check_capacity(kind="component", scope="section", current_count=13, maximum=15, requested=2)

    with pytest.raises(LimitReached) as exc:
        check_capacity(kind="component", scope="section", current_count=13, maximum=15, requested=3)
    assert exc.value.code == "COMPONENT_LIMIT_REACHED"


def test_last_section_of_unpublished_portfolio_is_protected():
    portfolio = SimpleNamespace(id="p1", is_published=False)

    with pytest.raises(CannotDeleteLastRequired) as exc:
        assert_section_deletable(portfolio=portfolio, section_count=1)
    assert exc.value.code == "CANNOT_DELETE_LAST_REQUIRED"

    assert_section_deletable(portfolio=portfolio, section_count=2)


def test_published_portfolio_may_lose_last_section():
    portfolio = SimpleNamespace(id="p1", is_published=True)
    assert_section_deletable(portfolio=portfolio, section_count=1)


def test_publish_requirements():
    with pytest.raises(UnmetRequirements):
        assert_publishable(section_count=0, component_count=0)
    with pytest.raises(UnmetRequirements):
        assert_publishable(section_count=2, component_count=0)

    assert_publishable(section_count=1, component_count=1)


def test_parse_unmodified_since_formats():
    assert parse_unmodified_since(None) is None
    assert parse_unmodified_since("") is None

    http_date = parse_unmodified_since("Wed, 21 Oct 2015 07:28:00 GMT")
    assert http_date == datetime(2015, 10, 21, 7, 28, tzinfo=timezone.utc)

    naive_iso = parse_unmodified_since("2015-10-21T07:28:00")
    assert naive_iso.tzinfo is not None


def test_parse_unmodified_since_rejects_garbage():
    with pytest.raises(ValidationFailed):
        parse_unmodified_since("not a date")


def test_optimistic_lock_compares_naive_store_times_as_utc():
    entity = SimpleNamespace(updated_at=datetime(2024, 1, 2, 12, 0))

    enforce_optimistic_lock(entity, datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc))
    enforce_optimistic_lock(entity, None)

    with pytest.raises(Conflict):
        enforce_optimistic_lock(entity, datetime(2024, 1, 1, tzinfo=timezone.utc))
