# schemas/filters.py
from pydantic import BaseModel
from typing import Optional

class TradeFilters(BaseModel):
    """Filtros activos sobre la lista de trades. None o cadena vacía = filtro inactivo."""
    date: Optional[str] = None # Igualdad exacta contra date_of_trade
    strategy_name: Optional[str] = None # Se resuelve a strategy_id vía StrategyIndex
    ticker: Optional[str] = None # Subcadena, sensible a mayúsculas

    def is_empty(self) -> bool:
        return not (self.date or self.strategy_name or self.ticker)
