import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from folio.domain.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def transactional(session):
    """
    Context manager for database transactions.

    Commits on success; any failure rolls the whole unit of work back, so a
    scope is never left partially shifted. Store failures surface as StoreError.
    """
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Transaction rolled back after store failure")
        raise StoreError() from exc
    except Exception:
        session.rollback()
        raise
