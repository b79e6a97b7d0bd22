"""Roster codec — JSON encoding of employees and whole organizations.

This is the optional serialization collaborator: the core only exposes
entity fields for encoding and accepts fully-populated entities on decode.

Roster document shape::

    {
      "version": 1,
      "departments": [{"id": "DEPT-0001", "name": "...", "code": "IT", "members": [0]}],
      "members": [{"kind": "employee", "person": {...}, "employee_id": "EMP0001", ...}]
    }

``departments[].members`` are indexes into ``members`` so membership order
survives a round trip even when several employees share an employee id.
Membership is restored through the registry, never by trusting the
decoded ``department_id`` fields.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from orgdir.domain.errors import RosterError
from orgdir.domain.models import Department, Employee, Member
from orgdir.infrastructure.organization import Organization

ROSTER_VERSION = 1

_employees_adapter: TypeAdapter[list[Employee]] = TypeAdapter(list[Employee])


class RosterDepartment(BaseModel):
    """One department entry with member indexes."""

    id: str
    name: str
    code: str
    members: list[int] = Field(default_factory=list)


class RosterDocument(BaseModel):
    """Top-level roster document."""

    version: int = ROSTER_VERSION
    departments: list[RosterDepartment] = Field(default_factory=list)
    members: list[Member] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Employees
# ---------------------------------------------------------------------------


def encode_employees(employees: Iterable[Employee], *, indent: int | None = 2) -> str:
    """Encode a sequence of employees as a JSON array."""
    return _employees_adapter.dump_json(list(employees), indent=indent).decode("utf-8")


def decode_employees(text: str) -> list[Employee]:
    """Decode a JSON array of fully-populated employees."""
    try:
        return _employees_adapter.validate_json(text)
    except ValidationError as exc:
        msg = f"Invalid employee data: {exc.error_count()} error(s)"
        raise RosterError(msg) from exc


# ---------------------------------------------------------------------------
# Organizations
# ---------------------------------------------------------------------------


def dump_roster(org: Organization, *, indent: int | None = 2) -> str:
    """Encode every department and directory member of *org*."""
    with org.transaction():
        members = org.directory.all()
        positions = {id(member): index for index, member in enumerate(members)}
        departments = [
            RosterDepartment(
                id=department.id,
                name=department.name,
                code=department.code,
                members=[
                    positions[id(employee)]
                    for employee in org.departments.members(department)
                    if id(employee) in positions
                ],
            )
            for department in org.departments.all()
        ]
        document = RosterDocument(departments=departments, members=members)
        return document.model_dump_json(indent=indent)


def load_roster(text: str, *, org: Organization | None = None) -> Organization:
    """Decode a roster document into *org* (a fresh Organization by default)."""
    try:
        document = RosterDocument.model_validate_json(text)
    except ValidationError as exc:
        msg = f"Invalid roster: {exc.error_count()} error(s)"
        raise RosterError(msg) from exc
    if document.version != ROSTER_VERSION:
        msg = f"Unsupported roster version {document.version} (expected {ROSTER_VERSION})"
        raise RosterError(msg)

    org = org if org is not None else Organization()
    with org.transaction():
        for member in document.members:
            if isinstance(member, Employee):
                member.department_id = None
            org.directory.add(member)

        for entry in document.departments:
            try:
                department = org.departments.restore(
                    Department(id=entry.id, name=entry.name, code=entry.code)
                )
            except ValueError as exc:
                raise RosterError(str(exc)) from exc
            for index in entry.members:
                employee = _member_at(document, index, entry.code)
                org.departments.add_employee(department, employee)
    return org


def _member_at(document: RosterDocument, index: int, code: str) -> Employee:
    if not 0 <= index < len(document.members):
        msg = f"Department {code!r} references missing member #{index}"
        raise RosterError(msg)
    member = document.members[index]
    if not isinstance(member, Employee):
        msg = f"Department {code!r} member #{index} is not an employee"
        raise RosterError(msg)
    return member
