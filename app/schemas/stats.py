from app.schemas.base import CamelModel


class DepartmentStats(CamelModel):
    """Headcount for one department"""
    department: str
    count: int = 0
    active_count: int = 0


class EmployeeStats(CamelModel):
    """Directory-wide statistics"""
    total_employees: int = 0
    active_employees: int = 0
    inactive_employees: int = 0
    department_stats: list[DepartmentStats] = []
    average_salary: int = 0  # Rounded to the nearest whole unit, 0 when empty
