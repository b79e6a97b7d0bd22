"""DirectoryService — the Person/Employee facade over the directory core.

Hiring pipeline: VALIDATE → CONSTRUCT → REGISTER → ASSIGN → EVENT → RESPOND

Validation runs name → age → employee_id → salary and stops at the first
failure, before any entity exists. A department code that resolves to
nothing leaves the new employee registered but unassigned and is reported
as a warning.

Raises are applied as ``salary * (1 + percentage / 100)`` with no bound on
the percentage. A resulting salary outside the valid range is flagged as a
warning and kept as computed.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import structlog

from orgdir.domain.errors import ValidationFailure
from orgdir.domain.models import DepartmentSummary, Employee, Person
from orgdir.domain.rules import (
    MAX_SALARY,
    is_valid_salary,
    validate_employee_fields,
    validate_percentage,
    validate_person_fields,
)
from orgdir.services.base import BaseService
from orgdir.services.result import ServiceResult

if TYPE_CHECKING:
    from orgdir.domain.models import Department
    from orgdir.infrastructure.organization import Organization

log = structlog.get_logger(__name__)


class DepartmentStructure:
    """Lazy, restartable view of every department and its members.

    Nothing is read until iteration starts. Each ``iter()`` takes a fresh
    snapshot under the organization lock, then yields one
    :class:`DepartmentSummary` per department in creation order.
    """

    def __init__(self, org: Organization) -> None:
        self._org = org

    def __iter__(self) -> Iterator[DepartmentSummary]:
        with self._org.transaction():
            snapshot = [
                (department, [e.name for e in self._org.departments.members(department)])
                for department in self._org.departments.all()
            ]
        for department, names in snapshot:
            yield DepartmentSummary(
                id=department.id,
                name=department.name,
                code=department.code,
                employee_count=len(names),
                members=names,
            )


class DirectoryService(BaseService):
    """Creation, lookup, assignment, and raises for people and employees."""

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------

    def create_person(self, name: str, age: int) -> ServiceResult:
        """Validate and register a plain Person."""
        op = "create_person"
        warnings: list[str] = []
        try:
            validate_person_fields(name, age)
        except ValidationFailure as exc:
            return self._validation_failed(op, exc)

        person = Person(name=name, age=age)
        self._org.directory.add(person)
        log.info("person.added", member=person.describe())
        self._dispatch_event("post_register", {"kind": person.kind, "name": person.name}, warnings)
        return ServiceResult(ok=True, op=op, data=person.to_summary(), warnings=warnings)

    def create_and_register_employee(
        self,
        name: str,
        age: int,
        employee_id: str,
        salary: Decimal | float | int,
        department_code: str | None = None,
    ) -> ServiceResult:
        """Validate, construct, register, and (when the code resolves) assign an Employee."""
        op = "hire_employee"
        warnings: list[str] = []

        # ── VALIDATE ──────────────────────────────────────────────
        try:
            validate_employee_fields(name, age, employee_id, salary)
        except ValidationFailure as exc:
            return self._validation_failed(op, exc)

        # ── CONSTRUCT / REGISTER ──────────────────────────────────
        employee = Employee(
            person=Person(name=name, age=age),
            employee_id=employee_id,
            salary=Decimal(str(salary)),
        )
        department: Department | None = None
        with self._org.transaction():
            self._org.directory.add(employee)
            # ── ASSIGN ────────────────────────────────────────────
            if department_code is not None:
                department = self._org.departments.find_by_code(department_code)
                if department is not None:
                    self._org.departments.add_employee(department, employee)
        log.info("person.added", member=employee.describe())

        if department_code is not None and department is None:
            log.warning("department.not_found", code=department_code)
            warnings.append(f"Department with code {department_code} not found")

        # ── EVENT ─────────────────────────────────────────────────
        self._dispatch_event(
            "post_register", {"kind": employee.kind, "name": employee.name}, warnings
        )
        if department is not None:
            self._dispatch_event(
                "post_assign",
                {"employee_id": employee.employee_id, "department_code": department.code},
                warnings,
            )

        # ── RESPOND ───────────────────────────────────────────────
        data = employee.to_summary()
        data["department_code"] = department.code if department is not None else None
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def give_raise(self, employee: Employee, percentage: Decimal | float | int) -> ServiceResult:
        """Multiply the salary by ``1 + percentage / 100``.

        The percentage must be finite. The new salary is not re-validated;
        leaving the valid range only produces a warning.
        """
        op = "give_raise"
        warnings: list[str] = []
        try:
            pct = validate_percentage(percentage)
        except ValidationFailure as exc:
            return self._validation_failed(op, exc)
        factor = 1 + pct / 100
        with self._org.transaction():
            old_salary = employee.salary
            employee.salary = old_salary * factor
            new_salary = employee.salary

        if not is_valid_salary(new_salary):
            log.warning("salary.out_of_range", employee_id=employee.employee_id, salary=new_salary)
            warnings.append(
                f"Salary {new_salary} for {employee.employee_id} is outside 0..{MAX_SALARY}"
            )
        log.info(
            "salary.raised",
            employee_id=employee.employee_id,
            old=old_salary,
            new=new_salary,
        )
        self._dispatch_event(
            "post_raise",
            {
                "employee_id": employee.employee_id,
                "old_salary": str(old_salary),
                "new_salary": str(new_salary),
            },
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "employee_id": employee.employee_id,
                "name": employee.name,
                "percentage": str(percentage),
                "old_salary": str(old_salary),
                "new_salary": str(new_salary),
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Departments
    # ------------------------------------------------------------------

    def create_department(self, name: str, code: str) -> ServiceResult:
        """Register a department. A reused code is a warning, not an error."""
        op = "create_department"
        warnings: list[str] = []
        with self._org.transaction():
            existing = self._org.departments.find_by_code(code)
            department = self._org.departments.create(name, code)
        if existing is not None:
            warnings.append(
                f"Department code {code} is already used by {existing.id}; "
                "lookups by code resolve to the first department"
            )
        log.info("department.created", code=department.code, id=department.id)
        self._dispatch_event(
            "post_department_create",
            {"department_id": department.id, "code": department.code},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": department.id, "name": department.name, "code": department.code},
            warnings=warnings,
        )

    def assign_employee(self, employee: Employee, department_code: str) -> ServiceResult:
        """Add *employee* to the department resolved from *department_code*."""
        op = "assign_employee"
        warnings: list[str] = []
        with self._org.transaction():
            department = self._org.departments.find_by_code(department_code)
            if department is None:
                log.warning("department.not_found", code=department_code)
                return self._not_found(op, "department", department_code)
            changed = self._org.departments.add_employee(department, employee)

        if changed:
            self._dispatch_event(
                "post_assign",
                {"employee_id": employee.employee_id, "department_code": department.code},
                warnings,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "employee_id": employee.employee_id,
                "department_id": department.id,
                "department_code": department.code,
                "changed": changed,
            },
            warnings=warnings,
        )

    def unassign_employee(
        self,
        employee: Employee,
        department_code: str | None = None,
    ) -> ServiceResult:
        """Remove *employee* from a department.

        Uses the employee's current department unless *department_code* is
        given. Removing a non-member is a no-op reported as ``changed: False``.
        """
        op = "unassign_employee"
        warnings: list[str] = []
        with self._org.transaction():
            if department_code is None:
                department = self._org.departments.department_of(employee)
            else:
                department = self._org.departments.find_by_code(department_code)
                if department is None:
                    return self._not_found(op, "department", department_code)
            changed = (
                self._org.departments.remove_employee(department, employee)
                if department is not None
                else False
            )

        if changed and department is not None:
            self._dispatch_event(
                "post_unassign",
                {"employee_id": employee.employee_id, "department_code": department.code},
                warnings,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "employee_id": employee.employee_id,
                "department_code": department.code if department is not None else None,
                "changed": changed,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_person(self, name: str) -> ServiceResult:
        op = "find_person"
        member = self._org.directory.find_by_name(name)
        if member is None:
            return self._not_found(op, "person", name)
        return ServiceResult(ok=True, op=op, data=self._member_data(member))

    def find_employee(self, employee_id: str) -> ServiceResult:
        op = "find_employee"
        employee = self._org.directory.find_by_employee_id(employee_id)
        if employee is None:
            return self._not_found(op, "employee", employee_id)
        return ServiceResult(ok=True, op=op, data=self._member_data(employee))

    def find_department(self, code: str) -> ServiceResult:
        op = "find_department"
        with self._org.transaction():
            department = self._org.departments.find_by_code(code)
            if department is None:
                return self._not_found(op, "department", code)
            members = self._org.departments.members(department)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": department.id,
                "name": department.name,
                "code": department.code,
                "employee_count": len(members),
                "members": [e.to_summary() for e in members],
            },
        )

    def list_people(self) -> ServiceResult:
        items = [self._member_data(m) for m in self._org.directory.all()]
        return ServiceResult(ok=True, op="list_people", data={"count": len(items), "items": items})

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def iter_department_structure(self) -> DepartmentStructure:
        """Return a lazy, restartable iterable of department summaries."""
        return DepartmentStructure(self._org)

    def display_department_structure(self) -> ServiceResult:
        """Materialize the department structure into a result payload."""
        items = [summary.model_dump() for summary in self.iter_department_structure()]
        unassigned = [e.name for e in self._org.directory.employees() if not e.is_assigned]
        return ServiceResult(
            ok=True,
            op="department_structure",
            data={"count": len(items), "items": items, "unassigned": unassigned},
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _member_data(self, member: Person | Employee) -> dict[str, Any]:
        data = member.to_summary()
        data["description"] = member.describe()
        if isinstance(member, Employee):
            department = self._org.departments.department_of(member)
            data["department_code"] = department.code if department is not None else None
        return data

    @staticmethod
    def _validation_failed(op: str, exc: ValidationFailure) -> ServiceResult:
        log.info("validation.failed", op=op, field=exc.field, value=exc.value)
        return ServiceResult.failure(op, "VALIDATION_FAILED", str(exc), **exc.to_detail())

    @staticmethod
    def _not_found(op: str, kind: str, key: str) -> ServiceResult:
        return ServiceResult.failure(
            op, "NOT_FOUND", f"No {kind} found for {key!r}", kind=kind, key=key
        )
