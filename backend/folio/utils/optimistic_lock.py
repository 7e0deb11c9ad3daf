from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import parse, ParserError

from folio.domain.exceptions import Conflict, ValidationFailed


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def parse_unmodified_since(header_value: Optional[str]) -> Optional[datetime]:
    """Parses an If-Unmodified-Since header (HTTP date or ISO 8601)."""
    if not header_value:
        return None  # No optimistic lock requested

    try:
        return normalize_ts(parse(header_value))
    except (ParserError, OverflowError, ValueError) as exc:
        raise ValidationFailed(
            "Invalid If-Unmodified-Since header",
            details={"If-Unmodified-Since": header_value},
        ) from exc


def enforce_optimistic_lock(entity, client_ts: Optional[datetime]) -> None:
    """
    Raises Conflict if the entity has been modified after ``client_ts``.
    """
    if client_ts is None:
        return

    server_ts = normalize_ts(entity.updated_at)

    if server_ts > client_ts:
        raise Conflict(
            details={
                "updated_at": server_ts.isoformat(),
                "if_unmodified_since": client_ts.isoformat(),
            }
        )
