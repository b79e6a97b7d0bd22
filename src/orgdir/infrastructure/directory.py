"""DirectoryStore — the canonical collection of people and employees.

INVARIANT: No member appears twice. Membership is by reference identity,
so re-adding the same object is a no-op, while two distinct objects with
identical fields are both kept.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from orgdir.domain.models import Employee

if TYPE_CHECKING:
    from orgdir.domain.models import Person

logger = logging.getLogger(__name__)


class DirectoryStore:
    """Insertion-ordered store of directory members.

    Parameters:
        lock: Lock shared with the owning :class:`Organization`. A private
            lock is created when the store is used standalone.
    """

    def __init__(self, lock: threading.RLock | None = None) -> None:
        self._lock = lock or threading.RLock()
        self._members: list[Person | Employee] = []

    def add(self, member: Person | Employee) -> bool:
        """Append *member* unless this exact object is already stored.

        Returns True when an insertion occurred.
        """
        with self._lock:
            if self._contains(member):
                return False
            self._members.append(member)
        logger.debug("Added %s: %s", member.kind, member.name)
        return True

    def find_by_name(self, name: str) -> Person | Employee | None:
        """Case-insensitive exact name match; the first inserted member wins."""
        wanted = name.casefold()
        with self._lock:
            for member in self._members:
                if member.name.casefold() == wanted:
                    return member
        return None

    def find_by_employee_id(self, employee_id: str) -> Employee | None:
        with self._lock:
            for member in self._members:
                if isinstance(member, Employee) and member.employee_id == employee_id:
                    return member
        return None

    def all(self) -> list[Person | Employee]:
        """Snapshot of every member. Mutating the returned list never affects the store."""
        with self._lock:
            return list(self._members)

    def employees(self) -> list[Employee]:
        with self._lock:
            return [m for m in self._members if isinstance(m, Employee)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._members)

    def __contains__(self, member: object) -> bool:
        with self._lock:
            return self._contains(member)

    def _contains(self, member: object) -> bool:
        return any(existing is member for existing in self._members)
