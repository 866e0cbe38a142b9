# tests/services/test_filter_engine.py
import pytest

from schemas.filters import TradeFilters
from services.filter_engine import apply_filters
from services.strategy_index import StrategyIndex


def _ids(trades):
    return [t.id for t in trades]


def test_no_filters_returns_all_in_order(sample_trades, strategy_index):
    result = apply_filters(sample_trades, TradeFilters(), strategy_index)
    assert _ids(result) == [1, 2, 3, 4, 5]
    # Nueva lista, mismos objetos
    assert result is not sample_trades
    assert all(a is b for a, b in zip(result, sample_trades))


def test_empty_strings_are_inactive(sample_trades, strategy_index):
    filters = TradeFilters(date="", strategy_name="", ticker="")
    assert _ids(apply_filters(sample_trades, filters, strategy_index)) == [1, 2, 3, 4, 5]


def test_date_filter_exact_match(sample_trades, strategy_index):
    result = apply_filters(sample_trades, TradeFilters(date="2024-01-02"), strategy_index)
    assert _ids(result) == [2]
    # Un prefijo de fecha no es igualdad
    assert apply_filters(sample_trades, TradeFilters(date="2024-01"), strategy_index) == []


def test_strategy_name_resolves_to_id(sample_trades, strategy_index):
    result = apply_filters(sample_trades, TradeFilters(strategy_name="Mean Reversion"), strategy_index)
    assert _ids(result) == [2, 3]


def test_unknown_strategy_name_matches_nothing(sample_trades, strategy_index):
    result = apply_filters(sample_trades, TradeFilters(strategy_name="Does Not Exist"), strategy_index)
    assert result == []


def test_strategy_filter_with_empty_index_matches_nothing(sample_trades):
    result = apply_filters(sample_trades, TradeFilters(strategy_name="Momentum"), StrategyIndex())
    assert result == []


def test_ticker_filter_is_case_sensitive_substring(sample_trades, strategy_index):
    assert _ids(apply_filters(sample_trades, TradeFilters(ticker="AAP"), strategy_index)) == [1, 3]
    assert _ids(apply_filters(sample_trades, TradeFilters(ticker="aapl"), strategy_index)) == [5]
    assert _ids(apply_filters(sample_trades, TradeFilters(ticker="O"), strategy_index)) == [4]


def test_filters_combine_with_and(sample_trades, strategy_index):
    filters = TradeFilters(date="2024-01-01", strategy_name="Momentum", ticker="AAPL")
    assert _ids(apply_filters(sample_trades, filters, strategy_index)) == [1]


@pytest.mark.parametrize("filters", [
    TradeFilters(),
    TradeFilters(date="2024-01-01"),
    TradeFilters(strategy_name="Momentum"),
    TradeFilters(ticker="A"),
    TradeFilters(date="2024-01-01", strategy_name="Mean Reversion", ticker="AAPL"),
    TradeFilters(strategy_name="Unknown"),
])
def test_filter_is_idempotent_subsequence(sample_trades, strategy_index, filters):
    once = apply_filters(sample_trades, filters, strategy_index)
    twice = apply_filters(once, filters, strategy_index)
    assert _ids(twice) == _ids(once)

    # Subsecuencia que conserva el orden, sin duplicados ni elementos ajenos
    positions = [sample_trades.index(t) for t in once]
    assert positions == sorted(set(positions))


def test_input_is_not_mutated(sample_trades, strategy_index):
    before = [t.model_dump() for t in sample_trades]
    apply_filters(sample_trades, TradeFilters(ticker="MSFT"), strategy_index)
    assert [t.model_dump() for t in sample_trades] == before
