from fastapi import APIRouter, Depends, Query, status

from app.core.employee_query import EmployeeFilter, filter_employees
from app.db.session import get_store
from app.db.store import EmployeeStore
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from app.schemas.envelope import DataResponse, ListResponse, MessageResponse

router = APIRouter(prefix="/api/employees", tags=["employees"])


def to_out(e: Employee) -> EmployeeOut:
    return EmployeeOut.model_validate(e)


@router.get("", response_model=ListResponse[EmployeeOut])
def list_employees(
    department: str | None = Query(default=None, description="Exact department name (case-insensitive)"),
    status: str | None = Query(default=None, description="Active or Inactive (case-insensitive)"),
    search: str | None = Query(default=None, description="Substring of first name, last name, email or role"),
    store: EmployeeStore = Depends(get_store),
):
    """
    List employees, optionally narrowed by department, status and a search term.

    All supplied filters must match.
    """
    spec = EmployeeFilter(department=department, status=status, search=search)
    items = [to_out(e) for e in filter_employees(store.snapshot(), spec)]
    return ListResponse(count=len(items), data=items)


@router.get("/{employee_id}", response_model=DataResponse[EmployeeOut])
def get_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_store),
):
    return DataResponse(data=to_out(store.get(employee_id)))


@router.post("", response_model=MessageResponse[EmployeeOut], status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate,
    store: EmployeeStore = Depends(get_store),
):
    employee = store.create(payload.model_dump())
    return MessageResponse(message="Employee created successfully", data=to_out(employee))


@router.put("/{employee_id}", response_model=MessageResponse[EmployeeOut])
@router.patch("/{employee_id}", response_model=MessageResponse[EmployeeOut])
def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    store: EmployeeStore = Depends(get_store),
):
    """
    Overwrite the fields present in the body; everything else is kept.
    """
    employee = store.update(employee_id, payload.model_dump(exclude_unset=True))
    return MessageResponse(message="Employee updated successfully", data=to_out(employee))


@router.delete("/{employee_id}", response_model=MessageResponse[EmployeeOut])
def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_store),
):
    employee = store.delete(employee_id)
    return MessageResponse(message="Employee deleted successfully", data=to_out(employee))
