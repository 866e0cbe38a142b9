# schemas/view.py
from enum import Enum
from pydantic import BaseModel
from typing import List

from schemas.filters import TradeFilters
from schemas.position import PositionRow
from schemas.trade import Trade

class ComparisonState(str, Enum):
    IDLE = "IDLE" # Selección con 0 o 1 trades
    READY = "READY" # Exactamente 2 trades seleccionados
    SUBMITTING = "SUBMITTING" # Petición de comparación en vuelo

class TradeRow(Trade):
    """Trade con los datos derivados que necesita la tabla."""
    strategy_name: str
    selected: bool = False
    matched: bool = False

class TradeBookView(BaseModel):
    filters: TradeFilters
    trades: List[TradeRow]
    positions: List[PositionRow]
    selection: List[int]
    comparison_state: ComparisonState
