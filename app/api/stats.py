from fastapi import APIRouter, Depends

from app.core.employee_query import compute_statistics
from app.db.session import get_store
from app.db.store import EmployeeStore
from app.schemas.envelope import DataResponse
from app.schemas.stats import EmployeeStats

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=DataResponse[EmployeeStats])
def get_stats(store: EmployeeStore = Depends(get_store)):
    """
    Headcount, per-department breakdown and average salary.
    """
    return DataResponse(data=compute_statistics(store.snapshot()))
