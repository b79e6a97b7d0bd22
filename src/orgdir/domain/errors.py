"""Error taxonomy for the directory core.

Lookups signal absence by returning ``None``; only validation and roster
decoding raise.
"""

from __future__ import annotations

from typing import Any


class OrgdirError(Exception):
    """Base class for all orgdir exceptions."""


class ValidationFailure(OrgdirError):
    """A scalar input failed its validation predicate.

    Attributes:
        field: Name of the rejected field (``"name"``, ``"age"``, ...).
        value: The offending value, unchanged.
        reason: Human-readable description of the rule that failed.
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")

    def to_detail(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value, "reason": self.reason}


class RosterError(OrgdirError):
    """Roster text could not be decoded into entities."""
