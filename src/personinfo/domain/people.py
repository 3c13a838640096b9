"""Query and patch value types shared by the service and the store.

Plain dataclasses; no ORM or transport imports. Zero values (``""`` / ``0``)
always mean "not set".
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


class Predicate(str, Enum):
    CONTAINS = "contains"  # case-insensitive substring
    AT_LEAST = "at_least"  # inclusive lower bound
    EQUALS = "equals"


class SortField(str, Enum):
    """Columns a listing may be ordered by. Nothing outside this set reaches SQL."""

    ID = "id"
    NAME = "name"
    SURNAME = "surname"
    PATRONYMIC = "patronymic"
    AGE = "age"
    GENDER = "gender"
    NATIONALITY = "nationality"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


Constraint = tuple[str, Predicate, object]


@dataclass(frozen=True)
class IdentityTriple:
    name: str
    surname: str = ""
    patronymic: str = ""


@dataclass(frozen=True)
class PeopleFilters:
    name: str = ""
    surname: str = ""
    age: int = 0
    gender: str = ""
    nationality: str = ""

    def constraints(self) -> list[Constraint]:
        """Return one ``(field, predicate, value)`` per field that is set."""
        candidates: list[Constraint] = [
            ("name", Predicate.CONTAINS, self.name),
            ("surname", Predicate.CONTAINS, self.surname),
            ("age", Predicate.AT_LEAST, self.age),
            ("gender", Predicate.EQUALS, self.gender),
            ("nationality", Predicate.EQUALS, self.nationality),
        ]
        return [c for c in candidates if _is_set(c[2])]


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    size: int = 0

    @property
    def limit(self) -> int | None:
        return self.size if self.size > 0 else None

    @property
    def offset(self) -> int | None:
        if self.page > 1 and self.size > 0:
            return (self.page - 1) * self.size
        return None


@dataclass(frozen=True)
class SortOptions:
    by: SortField | None = None
    order: SortOrder | None = None

    @property
    def direction(self) -> SortOrder:
        return self.order or SortOrder.ASC


@dataclass(frozen=True)
class UpdatePatch:
    name: str = ""
    surname: str = ""
    patronymic: str = ""
    age: int = 0
    gender: str = ""
    nationality: str = ""

    def changes(self) -> dict[str, object]:
        """Non-zero fields only, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if _is_set(getattr(self, f.name))
        }

    def is_empty(self) -> bool:
        return not self.changes()


def _is_set(value: object) -> bool:
    if isinstance(value, str):
        return value != ""
    if isinstance(value, int):
        return value > 0
    return value is not None
