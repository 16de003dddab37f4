from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"

    @classmethod
    def _missing_(cls, value):
        # Accept "active", "INACTIVE", ...
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


@dataclass
class Employee:
    """A single record held by the employee store."""

    id: str
    first_name: str
    last_name: str
    email: str
    department: str
    role: str
    hire_date: date = field(default_factory=date.today)
    salary: int = 0
    manager: str | None = None
    phone: str = ""
    location: str = ""
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE


# Fields a caller may set through create/update; `id` is owned by the store.
EDITABLE_FIELDS = tuple(f.name for f in fields(Employee) if f.name != "id")

# Text fields that must never be empty.
REQUIRED_FIELDS = ("first_name", "last_name", "email", "department", "role")

# Fields that hold text whenever they are set.
TEXT_FIELDS = REQUIRED_FIELDS + ("manager", "phone", "location")
