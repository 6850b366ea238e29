from __future__ import annotations

from enum import Enum


class UserType(str, Enum):
    """Account type returned by the login endpoint, used for routing."""

    ADMIN = "ADMIN"
    CLIENT = "CLIENT"
    STUDENT = "STUDENT"


class DayStatus(str, Enum):
    """Single-letter attendance codes stored in the d_1..d_31 fields."""

    PRESENT = "P"
    ABSENT = "A"
    SUNDAY = "S"
    HOLIDAY = "H"
