"""People use-case service: enrichment on create, pass-through for the rest.

Owns ORM->DTO mapping and the translation of store error kinds into the
caller-facing taxonomy; routers never see ORM objects or store errors.
"""
from __future__ import annotations

import logging

from personinfo.api.schemas.people import (
    PeopleQuery,
    PersonCreate,
    PersonList,
    PersonRead,
    PersonUpdate,
)
from personinfo.domain.exceptions import (
    DuplicateSubjectError,
    NoUpdatedFieldsError,
    PersistenceError,
    PersonNotFoundError,
)
from personinfo.domain.people import (
    IdentityTriple,
    Pagination,
    PeopleFilters,
    SortOptions,
    UpdatePatch,
)
from personinfo.infra.db.errors import (
    NoUpdatableFieldsError,
    RecordConflictError,
    RecordNotFoundError,
    StoreError,
)
from personinfo.infra.db.repositories.person_repository import PersonRepository
from personinfo.infra.db.uow import UnitOfWork
from personinfo.models.person import Person
from personinfo.services.ports import (
    AgeProvider,
    GenderProvider,
    NationalityProvider,
    PersonStore,
)

logger = logging.getLogger(__name__)


class PeopleService:
    def __init__(
        self,
        uow: UnitOfWork,
        age_provider: AgeProvider,
        gender_provider: GenderProvider,
        nationality_provider: NationalityProvider,
        store: PersonStore | None = None,
    ) -> None:
        self._uow = uow
        self._age = age_provider
        self._gender = gender_provider
        self._nationality = nationality_provider
        self._store = store if store is not None else PersonRepository(uow.session)

    def create_person(self, payload: PersonCreate) -> PersonRead:
        op = "people.create"
        identity = IdentityTriple(payload.name, payload.surname, payload.patronymic)
        logger.info("%s: saving person %s", op, identity)

        try:
            exists = self._store.exists(identity)
        except StoreError as exc:
            logger.error("%s: existence check failed: %s", op, exc)
            raise PersistenceError(f"{op}: {exc}") from exc
        if exists:
            logger.info("%s: person already exists", op)
            raise DuplicateSubjectError(f"{op}: person already exists")

        # Provider errors already carry their kind; let them through untouched.
        try:
            age = self._age.age(identity.name)
            gender = self._gender.gender(identity.name)
            nationality = self._nationality.nationality(identity.name)
        except Exception as exc:
            logger.error("%s: enrichment failed: %s", op, exc)
            raise

        person = Person(
            name=identity.name,
            surname=identity.surname,
            patronymic=identity.patronymic,
            age=age,
            gender=gender,
            nationality=nationality,
        )
        try:
            self._store.save(person)
            self._uow.commit()
        except RecordConflictError as exc:
            # lost a race against a concurrent create of the same identity
            logger.info("%s: person already exists (constraint)", op)
            raise DuplicateSubjectError(f"{op}: person already exists") from exc
        except StoreError as exc:
            logger.error("%s: failed to save person: %s", op, exc)
            raise PersistenceError(f"{op}: {exc}") from exc

        logger.info("%s: person saved with id %s", op, person.id)
        return PersonRead.model_validate(person)

    def list_people(self, query: PeopleQuery) -> PersonList:
        op = "people.list"
        filters = PeopleFilters(
            name=query.name,
            surname=query.surname,
            age=query.age,
            gender=query.gender,
            nationality=query.nationality,
        )
        pagination = Pagination(page=query.page, size=query.size)
        sort = SortOptions(by=query.sort_by, order=query.order)
        logger.debug("%s: filters=%s pagination=%s sort=%s", op, filters, pagination, sort)

        try:
            people = self._store.find(filters, pagination, sort)
        except StoreError as exc:
            logger.error("%s: failed to fetch people: %s", op, exc)
            raise PersistenceError(f"{op}: {exc}") from exc

        return PersonList(
            items=[PersonRead.model_validate(p) for p in people],
            total=len(people),
        )

    def update_person(self, person_id: int, payload: PersonUpdate) -> PersonRead:
        op = "people.update"
        patch = UpdatePatch(**payload.model_dump())
        logger.info("%s: updating person %s", op, person_id)

        try:
            person = self._store.update_patch(person_id, patch)
            self._uow.commit()
        except NoUpdatableFieldsError as exc:
            logger.info("%s: no updated fields", op)
            raise NoUpdatedFieldsError(f"{op}: no updated fields") from exc
        except RecordNotFoundError as exc:
            logger.info("%s: person %s not found", op, person_id)
            raise PersonNotFoundError(f"{op}: person {person_id} not found") from exc
        except StoreError as exc:
            logger.error("%s: failed to update person %s: %s", op, person_id, exc)
            raise PersistenceError(f"{op}: {exc}") from exc

        return PersonRead.model_validate(person)

    def delete_person(self, person_id: int) -> None:
        op = "people.delete"
        logger.info("%s: deleting person %s", op, person_id)

        try:
            self._store.delete(person_id)
            self._uow.commit()
        except RecordNotFoundError as exc:
            logger.info("%s: person %s not found", op, person_id)
            raise PersonNotFoundError(f"{op}: person {person_id} not found") from exc
        except StoreError as exc:
            logger.error("%s: failed to delete person %s: %s", op, person_id, exc)
            raise PersistenceError(f"{op}: {exc}") from exc

        logger.info("%s: person %s deleted", op, person_id)
