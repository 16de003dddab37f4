from app.db.seed import seed_demo
from app.db.store import EmployeeStore
from app.models.employee import Employee


def seed(store: EmployeeStore) -> list[Employee]:
    return seed_demo(store)


def employee_data(**overrides) -> dict:
    """Store-level (snake_case) fields for a valid new employee"""
    data = {
        "first_name": "Test",
        "last_name": "Person",
        "email": "test.person@company.com",
        "department": "Engineering",
        "role": "Developer",
    }
    data.update(overrides)
    return data


def employee_payload(**overrides) -> dict:
    """Wire (camelCase) body for POST /api/employees"""
    body = {
        "firstName": "Test",
        "lastName": "Person",
        "email": "test.person@company.com",
        "department": "Engineering",
        "role": "Developer",
    }
    body.update(overrides)
    return body


def create_employee(store: EmployeeStore, email: str, department: str = "Engineering", **overrides) -> Employee:
    return store.create(employee_data(email=email, department=department, **overrides))
