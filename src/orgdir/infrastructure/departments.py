"""DepartmentRegistry — departments and the employee ↔ department link.

The registry owns membership: for each department id, an ordered list of
employee references. Employees only hold ``department_id`` as a lookup key,
and only this registry writes it.

INVARIANT: For every employee ``e`` with ``e.department_id == d.id``, the
member list of ``d`` contains ``e``, and vice versa. Both sides change
together under the registry lock, so no reader observes one side without
the other.

Department codes are not required to be unique. ``find_by_code`` returns
the first department created with a matching code.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from orgdir.domain.models import Department

if TYPE_CHECKING:
    from orgdir.domain.models import Employee

logger = logging.getLogger(__name__)

DEPARTMENT_ID_PREFIX = "DEPT-"


class DepartmentRegistry:
    """Creation-ordered department registry with owned membership lists.

    Parameters:
        lock: Lock shared with the owning :class:`Organization`.
    """

    def __init__(self, lock: threading.RLock | None = None) -> None:
        self._lock = lock or threading.RLock()
        self._departments: list[Department] = []
        self._members: dict[str, list[Employee]] = {}
        self._counter = 0

    # ------------------------------------------------------------------
    # Departments
    # ------------------------------------------------------------------

    def create(self, name: str, code: str) -> Department:
        """Register a new empty department. Duplicate codes are accepted."""
        with self._lock:
            self._counter += 1
            department = Department(
                id=f"{DEPARTMENT_ID_PREFIX}{self._counter:04d}",
                name=name,
                code=code,
            )
            self._register(department)
        logger.debug("Created department %s (%s)", department.code, department.id)
        return department

    def restore(self, department: Department) -> Department:
        """Register an already-identified department (roster decoding).

        The id counter advances past any numeric suffix so later
        :meth:`create` calls never reuse an id.
        """
        with self._lock:
            if self.get(department.id) is not None:
                msg = f"Department id {department.id!r} is already registered"
                raise ValueError(msg)
            suffix = department.id.removeprefix(DEPARTMENT_ID_PREFIX)
            if suffix.isdigit():
                self._counter = max(self._counter, int(suffix))
            self._register(department)
        return department

    def find_by_code(self, code: str) -> Department | None:
        """Case-insensitive code lookup; the first created match wins."""
        with self._lock:
            for department in self._departments:
                if department.matches_code(code):
                    return department
        return None

    def get(self, department_id: str) -> Department | None:
        with self._lock:
            for department in self._departments:
                if department.id == department_id:
                    return department
        return None

    def all(self) -> list[Department]:
        """Snapshot of departments in creation order."""
        with self._lock:
            return list(self._departments)

    def __len__(self) -> int:
        with self._lock:
            return len(self._departments)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def add_employee(self, department: Department, employee: Employee) -> bool:
        """Add *employee* to *department* and point its back-reference here.

        No-op (returns False) when the employee is already a member. An
        employee assigned elsewhere is first removed from that department.
        """
        with self._lock:
            members = self._members_of(department)
            if any(existing is employee for existing in members):
                return False
            if employee.department_id is not None:
                previous = self.get(employee.department_id)
                if previous is not None:
                    self._detach(previous, employee)
            members.append(employee)
            employee.department_id = department.id
        logger.debug("Assigned %s to %s", employee.employee_id, department.code)
        return True

    def remove_employee(self, department: Department, employee: Employee) -> bool:
        """Remove *employee* from *department* and clear its back-reference.

        No-op (returns False) when the employee is not a member.
        """
        with self._lock:
            removed = self._detach(department, employee)
        if removed:
            logger.debug("Removed %s from %s", employee.employee_id, department.code)
        return removed

    def members(self, department: Department) -> tuple[Employee, ...]:
        """Snapshot of the department's employees in insertion order."""
        with self._lock:
            return tuple(self._members_of(department))

    def department_of(self, employee: Employee) -> Department | None:
        """Resolve the employee's back-reference to its Department."""
        if not employee.is_assigned:
            return None
        return self.get(employee.department_id)

    # ------------------------------------------------------------------
    # Internal (caller holds the lock)
    # ------------------------------------------------------------------

    def _register(self, department: Department) -> None:
        self._departments.append(department)
        self._members[department.id] = []

    def _members_of(self, department: Department) -> list[Employee]:
        try:
            return self._members[department.id]
        except KeyError:
            msg = f"Department {department.id!r} is not registered"
            raise KeyError(msg) from None

    def _detach(self, department: Department, employee: Employee) -> bool:
        members = self._members_of(department)
        for index, existing in enumerate(members):
            if existing is employee:
                del members[index]
                if employee.department_id == department.id:
                    employee.department_id = None
                return True
        return False
