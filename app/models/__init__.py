from app.models.employee import Employee, EmployeeStatus

__all__ = [ "Employee", "EmployeeStatus" ]
