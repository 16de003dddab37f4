from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import date
from typing import Any, Iterable, Mapping

from app.core.audit import log_event
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models.employee import EDITABLE_FIELDS, REQUIRED_FIELDS, TEXT_FIELDS, Employee, EmployeeStatus

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _non_text(data: Mapping[str, Any]) -> list[str]:
    return [name for name in TEXT_FIELDS if data.get(name) is not None and not isinstance(data[name], str)]


def _coerce_salary(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(["salary"], "salary must be a non-negative integer")
    return value


def _coerce_hire_date(value: Any) -> date:
    if value is None:
        return date.today()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(["hire_date"], "hire_date must be an ISO date (YYYY-MM-DD)")


def _coerce_status(value: Any) -> EmployeeStatus:
    try:
        return EmployeeStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in EmployeeStatus)
        raise ValidationError(["status"], f"status must be one of: {allowed}")


class EmployeeStore:
    """
    In-memory collection of employee records.

    Every public method runs under one lock, and every mutation validates
    its input before touching the collection, so a failed call leaves the
    store exactly as it was. Callers only ever receive copies.
    """

    def __init__(self, id_prefix: str = "EMP", id_width: int = 3):
        self._records: dict[str, Employee] = {}
        self._lock = threading.RLock()
        self._next_seq = 1
        self._id_prefix = id_prefix
        self._id_width = id_width

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _issue_id(self) -> str:
        # Ids come from a counter, never from the current contents, so a
        # deleted id is never handed out again.
        seq = self._next_seq
        self._next_seq += 1
        return f"{self._id_prefix}{seq:0{self._id_width}d}"

    def _email_taken(self, email: str, exclude_id: str | None = None) -> bool:
        return any(e.email == email and e.id != exclude_id for e in self._records.values())

    def list(self) -> list[Employee]:
        with self._lock:
            return [replace(e) for e in self._records.values()]

    def snapshot(self) -> tuple[Employee, ...]:
        with self._lock:
            return tuple(replace(e) for e in self._records.values())

    def get(self, employee_id: str) -> Employee:
        with self._lock:
            employee = self._records.get(employee_id)
            if employee is None:
                raise NotFoundError("Employee", employee_id)
            return replace(employee)

    def create(self, data: Mapping[str, Any]) -> Employee:
        missing = [name for name in REQUIRED_FIELDS if _is_blank(data.get(name))]
        if missing:
            raise ValidationError(missing)
        not_text = _non_text(data)
        if not_text:
            raise ValidationError(not_text, f"Fields must be text: {', '.join(not_text)}")

        salary = _coerce_salary(data.get("salary"))
        hire_date = _coerce_hire_date(data.get("hire_date"))

        with self._lock:
            if self._email_taken(data["email"]):
                raise ConflictError("email", data["email"])

            employee = Employee(
                id=self._issue_id(),
                first_name=data["first_name"],
                last_name=data["last_name"],
                email=data["email"],
                department=data["department"],
                role=data["role"],
                hire_date=hire_date,
                salary=salary,
                manager=data.get("manager") or None,
                phone=data.get("phone") or "",
                location=data.get("location") or "",
                status=EmployeeStatus.ACTIVE,
            )
            self._records[employee.id] = employee

            log_event(
                action="EMPLOYEE_CREATED",
                entity_type="employee",
                entity_id=employee.id,
                metadata={"email": employee.email, "department": employee.department},
            )
            return replace(employee)

    def update(self, employee_id: str, data: Mapping[str, Any]) -> Employee:
        """
        Overwrite only the fields present in `data`.

        Unknown keys (including `id`) are ignored.
        """
        changes = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}

        invalid = [name for name in REQUIRED_FIELDS if name in changes and _is_blank(changes[name])]
        if invalid:
            raise ValidationError(invalid, f"Fields cannot be empty: {', '.join(invalid)}")
        not_text = _non_text(changes)
        if not_text:
            raise ValidationError(not_text, f"Fields must be text: {', '.join(not_text)}")

        if "salary" in changes:
            if changes["salary"] is None:
                raise ValidationError(["salary"], "salary must be a non-negative integer")
            changes["salary"] = _coerce_salary(changes["salary"])
        if "hire_date" in changes:
            if changes["hire_date"] is None:
                raise ValidationError(["hire_date"], "hire_date must be an ISO date (YYYY-MM-DD)")
            changes["hire_date"] = _coerce_hire_date(changes["hire_date"])
        if "status" in changes:
            changes["status"] = _coerce_status(changes["status"])
        if "manager" in changes:
            changes["manager"] = changes["manager"] or None
        for name in ("phone", "location"):
            if name in changes:
                changes[name] = changes[name] or ""

        with self._lock:
            current = self._records.get(employee_id)
            if current is None:
                raise NotFoundError("Employee", employee_id)

            new_email = changes.get("email")
            if new_email is not None and new_email != current.email:
                if self._email_taken(new_email, exclude_id=employee_id):
                    raise ConflictError("email", new_email)

            updated = replace(current, **changes)
            self._records[employee_id] = updated

            log_event(
                action="EMPLOYEE_UPDATED",
                entity_type="employee",
                entity_id=employee_id,
                metadata={"fields": sorted(changes)},
            )
            return replace(updated)

    def delete(self, employee_id: str) -> Employee:
        with self._lock:
            employee = self._records.pop(employee_id, None)
            if employee is None:
                raise NotFoundError("Employee", employee_id)

            log_event(
                action="EMPLOYEE_DELETED",
                entity_type="employee",
                entity_id=employee_id,
                metadata={"email": employee.email},
            )
            return employee

    def seed(self, records: Iterable[Mapping[str, Any]]) -> list[Employee]:
        created = [self.create(r) for r in records]
        logger.info("Seeded %d employees", len(created))
        return created
