from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


class DataAccessError(RuntimeError):
    pass


@contextmanager
def data_access(db: Session | None = None, *, action: str = "query") -> Iterator[None]:
    """Re-raise storage failures as DataAccessError.

    When a session is given, a failed write is rolled back before re-raising so the
    session stays usable for the rest of the request.
    """

    try:
        yield
    except SQLAlchemyError as exc:
        if db is not None:
            db.rollback()
        raise DataAccessError(f"Database {action} failed") from exc
