from datetime import datetime
from pydantic import BaseModel


class HealthOut(BaseModel):
    success: bool = True
    message: str
    timestamp: datetime
    uptime: float  # Seconds since the app started
