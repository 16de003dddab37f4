from fastapi import Request

from app.db.store import EmployeeStore


def get_store(request: Request) -> EmployeeStore:
    """Return the store owned by the running application."""
    return request.app.state.store
