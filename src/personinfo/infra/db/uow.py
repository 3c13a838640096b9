"""Unit of Work: one session per logical operation."""
from __future__ import annotations
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session
from personinfo.infra.db.engine import engine
from personinfo.infra.db.errors import RecordConflictError, StoreError


class UnitOfWork:
    """Context manager wrapping a single DB session.

    Commits on clean exit, rolls back on exception, always closes.
    """

    def __init__(self) -> None:
        self._session: Session | None = None

    def __enter__(self) -> "UnitOfWork":
        self._session = Session(engine)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self._session.commit()
            else:
                self._session.rollback()
        finally:
            self._session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use it as a context manager.")
        return self._session

    def commit(self) -> None:
        """Explicit mid-operation commit, so the caller sees the stored row."""
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise RecordConflictError(f"uow.commit: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f"uow.commit: {exc}") from exc

    def rollback(self) -> None:
        self.session.rollback()
