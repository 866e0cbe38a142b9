# services/aggregation_engine.py
import logging
from typing import Dict, Iterable, List

from schemas.position import Bucket, GroupKey, PositionRow
from schemas.trade import Trade
from services.strategy_index import StrategyIndex

logger = logging.getLogger(__name__)


def group_key(trade: Trade) -> GroupKey:
    return GroupKey(trade.date_of_trade, trade.strategy_id, trade.ticker, trade.time_horizon)


def group_trades(trades: Iterable[Trade]) -> Dict[GroupKey, Bucket]:
    """
    Agrupa trades por (fecha, estrategia, ticker, horizonte) y acumula open_qty,
    realised_pnl y unrealised_pnl. Los buckets quedan en el orden en que cada
    clave aparece por primera vez. No modifica la entrada.
    """
    buckets: Dict[GroupKey, Bucket] = {}
    for trade in trades:
        key = group_key(trade)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = Bucket(
                date_of_trade=trade.date_of_trade,
                strategy_id=trade.strategy_id,
                ticker=trade.ticker,
                time_horizon=trade.time_horizon,
            )
            buckets[key] = bucket
        bucket.total_open_qty += trade.open_qty
        bucket.total_realised_pnl += trade.realised_pnl
        bucket.total_unrealised_pnl += trade.unrealised_pnl
        bucket.trade_ids.append(trade.id)

    logger.debug(f"Agrupados trades en {len(buckets)} posiciones.")
    return buckets


def to_position_rows(buckets: Dict[GroupKey, Bucket], strategy_index: StrategyIndex) -> List[PositionRow]:
    """Aplana los buckets en filas de visualización con el nombre de estrategia resuelto."""
    return [
        PositionRow(**bucket.model_dump(exclude={"total_pnl", "trade_count"}),
                    strategy_name=strategy_index.name_for(bucket.strategy_id))
        for bucket in buckets.values()
    ]
