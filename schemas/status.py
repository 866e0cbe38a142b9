# schemas/status.py
from pydantic import BaseModel
from datetime import datetime

class StatusResponse(BaseModel):
    status: str
    timestamp: datetime
    backend_configured: bool
    trades_loaded: int
    comparison_state: str
