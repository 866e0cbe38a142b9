# schemas/position.py
from pydantic import BaseModel, Field, computed_field
from typing import List, NamedTuple

class GroupKey(NamedTuple):
    """Clave compuesta de agrupación. Dos trades comparten bucket sólo si los cuatro campos son idénticos."""
    date_of_trade: str
    strategy_id: int
    ticker: str
    time_horizon: str

class Bucket(BaseModel):
    """Posición agregada. Los campos de la clave se copian del primer trade asignado."""
    date_of_trade: str
    strategy_id: int
    ticker: str
    time_horizon: str
    total_open_qty: float = 0.0
    total_realised_pnl: float = 0.0
    total_unrealised_pnl: float = 0.0
    trade_ids: List[int] = Field(default_factory=list) # Miembros en orden de entrada

    @computed_field
    @property
    def total_pnl(self) -> float:
        return self.total_realised_pnl + self.total_unrealised_pnl

    @computed_field
    @property
    def trade_count(self) -> int:
        return len(self.trade_ids)

class PositionRow(Bucket):
    """Bucket listo para mostrar, con el nombre de estrategia resuelto."""
    strategy_name: str
