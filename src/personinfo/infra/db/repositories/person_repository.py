"""Repository for Person records. No business logic; caller owns the transaction.

Every database failure leaves this module as a ``StoreError`` subclass; values
always travel as bound parameters.
"""
from __future__ import annotations

import operator
from typing import Any, Callable

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, col, select

from personinfo.domain.people import (
    IdentityTriple,
    Pagination,
    PeopleFilters,
    Predicate,
    SortField,
    SortOptions,
    SortOrder,
    UpdatePatch,
)
from personinfo.infra.db.errors import (
    NoUpdatableFieldsError,
    RecordConflictError,
    RecordNotFoundError,
    StoreError,
)
from personinfo.models.person import Person

_PREDICATES: dict[Predicate, Callable[[Any, Any], Any]] = {
    Predicate.CONTAINS: lambda column, value: column.icontains(value, autoescape=True),
    Predicate.AT_LEAST: operator.ge,
    Predicate.EQUALS: operator.eq,
}

_COLUMNS = {
    "id": Person.id,
    "name": Person.name,
    "surname": Person.surname,
    "patronymic": Person.patronymic,
    "age": Person.age,
    "gender": Person.gender,
    "nationality": Person.nationality,
}

_SORT_COLUMNS = {field: _COLUMNS[field.value] for field in SortField}


class PersonRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def exists(self, identity: IdentityTriple) -> bool:
        stmt = select(Person.id).where(
            Person.name == identity.name,
            Person.surname == identity.surname,
            Person.patronymic == identity.patronymic,
        ).limit(1)
        try:
            return self._s.exec(stmt).first() is not None
        except SQLAlchemyError as exc:
            raise StoreError(f"person_repository.exists: {exc}") from exc

    def save(self, person: Person) -> Person:
        self._s.add(person)
        try:
            self._s.flush()  # get generated PK without committing
        except IntegrityError as exc:
            self._s.rollback()
            raise RecordConflictError(f"person_repository.save: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            self._s.rollback()
            raise StoreError(f"person_repository.save: {exc}") from exc
        return person

    def find(
        self,
        filters: PeopleFilters,
        pagination: Pagination,
        sort: SortOptions,
    ) -> list[Person]:
        stmt = select(Person)
        for field, predicate, value in filters.constraints():
            stmt = stmt.where(_PREDICATES[predicate](col(_COLUMNS[field]), value))

        if sort.by is not None:
            column = col(_SORT_COLUMNS[sort.by])
            stmt = stmt.order_by(column.desc() if sort.direction is SortOrder.DESC else column.asc())

        if pagination.limit is not None:
            stmt = stmt.limit(pagination.limit)
        if pagination.offset is not None:
            stmt = stmt.offset(pagination.offset)

        try:
            return list(self._s.exec(stmt).all())
        except SQLAlchemyError as exc:
            raise StoreError(f"person_repository.find: {exc}") from exc

    def update_patch(self, person_id: int, patch: UpdatePatch) -> Person:
        changes = patch.changes()
        if not changes:
            raise NoUpdatableFieldsError("person_repository.update_patch: no fields to update")

        stmt = (
            update(Person)
            .where(col(Person.id) == person_id)
            .values(**changes)
            .returning(Person)
        )
        try:
            person = self._s.exec(stmt).scalar_one_or_none()  # type: ignore[call-overload]
        except IntegrityError as exc:
            self._s.rollback()
            raise RecordConflictError(f"person_repository.update_patch: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            self._s.rollback()
            raise StoreError(f"person_repository.update_patch: {exc}") from exc

        if person is None:
            raise RecordNotFoundError(f"person_repository.update_patch: person {person_id} not found")
        return person

    def delete(self, person_id: int) -> None:
        stmt = delete(Person).where(col(Person.id) == person_id)
        try:
            result = self._s.exec(stmt)  # type: ignore[call-overload]
        except SQLAlchemyError as exc:
            self._s.rollback()
            raise StoreError(f"person_repository.delete: {exc}") from exc

        if result.rowcount == 0:
            raise RecordNotFoundError(f"person_repository.delete: person {person_id} not found")
