"""FastAPI dependencies."""
from __future__ import annotations
from typing import Generator
from fastapi import Depends, Request
from personinfo.infra.db.uow import UnitOfWork
from personinfo.infra.predictors import Predictors
from personinfo.services.people_service import PeopleService


def get_uow() -> Generator[UnitOfWork, None, None]:
    """Yield one UnitOfWork per request; commit/rollback in __exit__."""
    with UnitOfWork() as uow:
        yield uow


def get_predictors(request: Request) -> Predictors:
    """Provider clients built once in the application lifespan."""
    return request.app.state.predictors


def get_people_service(
    uow: UnitOfWork = Depends(get_uow),
    predictors: Predictors = Depends(get_predictors),
) -> PeopleService:
    return PeopleService(uow, predictors.age, predictors.gender, predictors.nationality)
