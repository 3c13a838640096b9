"""ORM table for enriched people."""
from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Person(SQLModel, table=True):
    __tablename__ = "people"
    __table_args__ = (
        UniqueConstraint("name", "surname", "patronymic", name="uq_people_identity"),
    )

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    surname: str = Field(default="", index=True)
    patronymic: str = Field(default="")
    age: int = Field(default=0, ge=0)
    gender: str = Field(default="")
    nationality: str = Field(default="")
