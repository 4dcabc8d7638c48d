from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


class Person:
    """Identity and name fields shared by people-like entities."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Employee(Person, Base):
    __tablename__ = "employees"

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"
