"""Entity models — Person, Employee, Department and the structure projection.

An Employee is a composed record: it holds a :class:`Person` plus the
employee-specific fields, rather than subclassing it. Both carry a ``kind``
discriminator so a directory member is the tagged variant ``Member``.

The Employee → Department link is non-owning: ``Employee.department_id``
is a lookup key into the Department Registry, which owns membership.
Only the registry writes ``department_id``.

INVARIANT: ``Person.age`` is never negative. Negative writes clamp to 0.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Person(BaseModel):
    """A named person with a stored age."""

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal["person"] = "person"
    name: str
    age: int = 0

    @field_validator("age")
    @classmethod
    def _clamp_age(cls, value: int) -> int:
        return max(0, value)

    def describe(self) -> str:
        return f"{self.name}, age {self.age}"

    def to_summary(self) -> dict[str, Any]:
        return {"kind": self.kind, "name": self.name, "age": self.age}


class Employee(BaseModel):
    """A Person with an employee id, a salary, and an optional department key.

    ``name`` and ``age`` are read through to the contained Person so an
    Employee can be used wherever a directory member is expected.
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal["employee"] = "employee"
    person: Person
    employee_id: str
    salary: Decimal
    department_id: str | None = None

    @property
    def name(self) -> str:
        return self.person.name

    @property
    def age(self) -> int:
        return self.person.age

    @property
    def is_assigned(self) -> bool:
        return self.department_id is not None

    def describe(self) -> str:
        return f"{self.person.describe()}, {self.employee_id}, salary {self.salary}"

    def to_summary(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "name": self.name,
            "age": self.age,
            "employee_id": self.employee_id,
            "salary": str(self.salary),
            "department_id": self.department_id,
        }


Member = Annotated[Person | Employee, Field(discriminator="kind")]


class Department(BaseModel):
    """A department value. Membership is owned by the registry, not stored here."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    code: str

    def matches_code(self, code: str) -> bool:
        """Case-insensitive comparison against this department's code."""
        return self.code.casefold() == code.casefold()


class DepartmentSummary(BaseModel):
    """Read-side projection of one department and its members."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    code: str
    employee_count: int
    members: list[str] = Field(default_factory=list)
