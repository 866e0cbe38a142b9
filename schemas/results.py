# schemas/results.py
from pydantic import BaseModel
from typing import Any, Optional

from core.errors import ErrorKind, TradeTrackerError

class OperationResult(BaseModel):
    """Resultado tipado de cada operación del TradeBookService; la capa de presentación decide cómo mostrarlo."""
    ok: bool
    operation: str
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    data: Optional[Any] = None

    @classmethod
    def success(cls, operation: str, data: Any = None, message: Optional[str] = None) -> "OperationResult":
        return cls(ok=True, operation=operation, data=data, message=message)

    @classmethod
    def failure(cls, operation: str, error: TradeTrackerError) -> "OperationResult":
        return cls(ok=False, operation=operation, error_kind=error.kind, message=error.message)
