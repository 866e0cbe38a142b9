# services/filter_engine.py
import logging
from typing import Callable, List, Sequence

from schemas.filters import TradeFilters
from schemas.trade import Trade
from services.strategy_index import StrategyIndex

logger = logging.getLogger(__name__)


def _build_predicates(filters: TradeFilters, strategy_index: StrategyIndex) -> List[Callable[[Trade], bool]]:
    predicates: List[Callable[[Trade], bool]] = []

    if filters.date:
        date = filters.date
        predicates.append(lambda t: t.date_of_trade == date)

    if filters.strategy_name:
        strategy_id = strategy_index.resolve_id(filters.strategy_name)
        if strategy_id is None:
            # Nombre desconocido: ningún trade puede coincidir
            logger.info(f"Estrategia '{filters.strategy_name}' no encontrada; el filtro excluye todos los trades.")
            return [lambda t: False]
        predicates.append(lambda t: t.strategy_id == strategy_id)

    if filters.ticker:
        ticker = filters.ticker
        predicates.append(lambda t: ticker in t.ticker)

    return predicates


def apply_filters(trades: Sequence[Trade], filters: TradeFilters, strategy_index: StrategyIndex) -> List[Trade]:
    """
    Devuelve la subsecuencia de `trades` que cumple todos los filtros activos (AND).
    Función pura: conserva el orden, no duplica ni crea elementos.
    """
    predicates = _build_predicates(filters, strategy_index)
    if not predicates:
        return list(trades)
    return [trade for trade in trades if all(p(trade) for p in predicates)]
