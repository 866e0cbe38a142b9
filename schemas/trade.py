# schemas/trade.py
import re
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

class Trade(BaseModel):
    """Representa una operación tal como la devuelve el backend de trades."""
    id: int
    date_of_trade: str # Fecha tal cual llega (ej. '2024-01-01'); el filtro compara por igualdad exacta
    ticker: str
    strategy_id: int # Referencia a Strategy.id
    time_horizon: str
    price: float
    units: float # Con signo: positivo compra, negativo venta
    qty: float
    current_price: float
    open_qty: float
    matched_trade_ids: Optional[str] = None # Lista codificada como texto, ej. "3,5"
    pnl: Optional[float] = None
    realised_pnl: float = 0.0
    unrealised_pnl: float = 0.0

    @field_validator('realised_pnl', 'unrealised_pnl', mode='before')
    @classmethod
    def null_pnl_to_zero(cls, v):
        # El backend puede devolver null antes de la primera comparación
        return 0.0 if v is None else v

    @property
    def matched_ids(self) -> List[int]:
        """
        Decodifica matched_trade_ids ('3,5', '[3, 5]', '3;5'...) a una lista de enteros.
        Cualquier texto no numérico actúa como separador; nunca lanza excepción.
        """
        if not self.matched_trade_ids:
            return []
        return [int(part) for part in re.findall(r"\d+", self.matched_trade_ids)]

    @property
    def is_matched(self) -> bool:
        return bool(self.matched_trade_ids)

    class Config:
        from_attributes = True


class TradeCompareRequest(BaseModel):
    """Payload para POST /trades/compare: exactamente dos IDs distintos."""
    trade_ids: List[int] = Field(..., min_length=2, max_length=2)

    @field_validator('trade_ids')
    @classmethod
    def ids_must_be_distinct(cls, v):
        if len(set(v)) != len(v):
            raise ValueError("Los dos trades a comparar deben ser distintos")
        return v


class TradeCompareResponse(BaseModel):
    """Respuesta autoritativa del backend tras comparar dos trades."""
    updated_trades: List[Trade] = Field(default_factory=list)
