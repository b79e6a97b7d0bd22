"""orgdir — in-memory organizational directory of people, employees and departments."""

__version__ = "0.1.0"
