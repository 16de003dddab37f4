import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.schemas.health import HealthOut

router = APIRouter(tags=["health"])


@router.get("/api/health", response_model=HealthOut)
def health(request: Request):
    state = request.app.state
    return HealthOut(
        message=f"{state.settings.APP_NAME} is running",
        timestamp=datetime.now(timezone.utc),
        uptime=round(time.monotonic() - state.started_at, 3),
    )
