"""Capabilities the people service depends on.

Each protocol is narrow enough that tests can substitute a plain object.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from personinfo.domain.people import (
    IdentityTriple,
    Pagination,
    PeopleFilters,
    SortOptions,
    UpdatePatch,
)
from personinfo.models.person import Person


@runtime_checkable
class AgeProvider(Protocol):
    def age(self, name: str) -> int:
        """Most probable age for *name*; ``InvalidSubjectError`` when unknown."""
        ...


@runtime_checkable
class GenderProvider(Protocol):
    def gender(self, name: str) -> str:
        ...


@runtime_checkable
class NationalityProvider(Protocol):
    def nationality(self, name: str) -> str:
        ...


@runtime_checkable
class PersonStore(Protocol):
    """Storage operations used by the service; see ``PersonRepository``."""

    def exists(self, identity: IdentityTriple) -> bool: ...

    def save(self, person: Person) -> Person: ...

    def find(
        self,
        filters: PeopleFilters,
        pagination: Pagination,
        sort: SortOptions,
    ) -> list[Person]: ...

    def update_patch(self, person_id: int, patch: UpdatePatch) -> Person: ...

    def delete(self, person_id: int) -> None: ...
