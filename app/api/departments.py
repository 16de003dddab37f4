from fastapi import APIRouter, Depends

from app.core.employee_query import list_departments
from app.db.session import get_store
from app.db.store import EmployeeStore
from app.schemas.envelope import DataResponse

router = APIRouter(prefix="/api/departments", tags=["departments"])


@router.get("", response_model=DataResponse[list[str]])
def get_departments(store: EmployeeStore = Depends(get_store)):
    """Distinct departments across current employees."""
    return DataResponse(data=list_departments(store.snapshot()))
