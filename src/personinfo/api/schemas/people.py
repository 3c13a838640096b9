"""People DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from pydantic import BaseModel, Field, field_validator
from personinfo.domain.people import SortField, SortOrder


class PersonCreate(BaseModel):
    name: str
    surname: str = ""
    patronymic: str = ""

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v.strip()

    @field_validator("surname", "patronymic")
    @classmethod
    def strip_optional(cls, v: str) -> str:
        return v.strip()


class PersonUpdate(BaseModel):
    name: str = ""
    surname: str = ""
    patronymic: str = ""
    age: int = Field(0, ge=0)
    gender: str = ""
    nationality: str = ""


class PersonRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    surname: str
    patronymic: str
    age: int
    gender: str
    nationality: str


class PersonList(BaseModel):
    items: list[PersonRead]
    total: int


class PeopleQuery(BaseModel):
    """Filters, pagination and sorting for a listing, as received from a caller."""

    name: str = ""
    surname: str = ""
    age: int = Field(0, ge=0)
    gender: str = ""
    nationality: str = ""
    page: int = Field(1, ge=0)
    size: int = Field(0, ge=0)
    sort_by: SortField | None = None
    order: SortOrder | None = None

    @field_validator("sort_by", "order", mode="before")
    @classmethod
    def lowercase_enum(cls, v):
        if isinstance(v, str):
            return v.lower() or None
        return v
