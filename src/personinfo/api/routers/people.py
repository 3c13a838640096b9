"""People endpoints."""
from typing import Annotated
from fastapi import APIRouter, Depends, Query, Response
from personinfo.api.deps import get_people_service
from personinfo.api.schemas.people import (
    PeopleQuery, PersonCreate, PersonList, PersonRead, PersonUpdate,
)
from personinfo.services.people_service import PeopleService

router = APIRouter(prefix="/people", tags=["people"])


@router.get("", response_model=PersonList)
def list_people(
    query: Annotated[PeopleQuery, Query()],
    service: PeopleService = Depends(get_people_service),
) -> PersonList:
    return service.list_people(query)


@router.post("", response_model=PersonRead, status_code=201)
def create_person(
    payload: PersonCreate, service: PeopleService = Depends(get_people_service),
) -> PersonRead:
    return service.create_person(payload)


@router.patch("/{person_id}", response_model=PersonRead)
def update_person(
    person_id: int, payload: PersonUpdate, service: PeopleService = Depends(get_people_service),
) -> PersonRead:
    return service.update_person(person_id, payload)


@router.delete("/{person_id}", status_code=204, response_class=Response)
def delete_person(
    person_id: int, service: PeopleService = Depends(get_people_service),
) -> Response:
    service.delete_person(person_id)
    return Response(status_code=204)
