"""
Read-side logic over a snapshot of employees: filtering, the department
listing and the dashboard statistics.

Everything here is a pure function of its arguments; nothing mutates the
records it is given.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from app.models.employee import Employee
from app.schemas.stats import DepartmentStats, EmployeeStats

SEARCH_FIELDS = ("first_name", "last_name", "email", "role")


@dataclass(frozen=True)
class EmployeeFilter:
    department: str | None = None
    status: str | None = None
    search: str | None = None

    def matches(self, employee: Employee) -> bool:
        if self.department and employee.department.lower() != self.department.lower():
            return False
        if self.status and employee.status.value.lower() != self.status.lower():
            return False
        if self.search:
            needle = self.search.lower()
            if not any(needle in getattr(employee, name).lower() for name in SEARCH_FIELDS):
                return False
        return True


def filter_employees(employees: Iterable[Employee], spec: EmployeeFilter | None = None) -> list[Employee]:
    """Records satisfying every supplied predicate, in input order."""
    if spec is None:
        return list(employees)
    return [e for e in employees if spec.matches(e)]


def list_departments(employees: Iterable[Employee]) -> list[str]:
    """Distinct departments in order of first appearance."""
    return list(dict.fromkeys(e.department for e in employees))


def _round_half_up(total: int, count: int) -> int:
    # Integer form of floor(total / count + 0.5)
    return (2 * total + count) // (2 * count)


def compute_statistics(employees: Sequence[Employee]) -> EmployeeStats:
    total = len(employees)
    active = sum(1 for e in employees if e.is_active)

    department_stats = []
    for dept in list_departments(employees):
        members = [e for e in employees if e.department == dept]
        department_stats.append(
            DepartmentStats(
                department=dept,
                count=len(members),
                active_count=sum(1 for e in members if e.is_active),
            )
        )

    average_salary = _round_half_up(sum(e.salary for e in employees), total) if total > 0 else 0

    return EmployeeStats(
        total_employees=total,
        active_employees=active,
        inactive_employees=total - active,
        department_stats=department_stats,
        average_salary=average_salary,
    )
