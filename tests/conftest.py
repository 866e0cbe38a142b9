"""
Fixtures compartidas: factoría de trades, estrategias de ejemplo y un
TradeRepository falso (AsyncMock) para probar el núcleo sin red.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from schemas.strategy import Strategy
from schemas.trade import Trade
from services.strategy_index import StrategyIndex
from services.trade_repository import TradeRepository


def build_trade(id, **overrides) -> Trade:
    """Trade con valores por defecto razonables; cualquier campo se puede sobrescribir."""
    data = {
        "id": id,
        "date_of_trade": "2024-01-01",
        "ticker": "AAPL",
        "strategy_id": 1,
        "time_horizon": "1D",
        "price": 100.0,
        "units": 10,
        "qty": 10,
        "current_price": 100.5,
        "open_qty": 10,
        "matched_trade_ids": None,
        "pnl": None,
        "realised_pnl": 0.0,
        "unrealised_pnl": 5.0,
    }
    data.update(overrides)
    return Trade(**data)


@pytest.fixture
def make_trade():
    return build_trade


@pytest.fixture
def strategies():
    return [Strategy(id=1, name="Momentum"), Strategy(id=2, name="Mean Reversion")]


@pytest.fixture
def strategy_index(strategies):
    return StrategyIndex(strategies)


@pytest.fixture
def sample_trades():
    return [
        build_trade(1, ticker="AAPL", strategy_id=1),
        build_trade(2, ticker="MSFT", strategy_id=2, date_of_trade="2024-01-02"),
        build_trade(3, ticker="AAPL", strategy_id=2),
        build_trade(4, ticker="GOOGL", strategy_id=1, time_horizon="1W"),
        build_trade(5, ticker="aapl", strategy_id=1),
    ]


@pytest.fixture
def mock_repository(strategies):
    """TradeRepository con todas las operaciones async mockeadas."""
    repo = MagicMock(spec=TradeRepository)
    repo.list_trades = AsyncMock(return_value=[])
    repo.list_strategies = AsyncMock(return_value=list(strategies))
    repo.create_strategy = AsyncMock()
    repo.delete_trade = AsyncMock(return_value=None)
    repo.compare_trades = AsyncMock()
    repo.close = AsyncMock()
    return repo
