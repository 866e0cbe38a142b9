# tests/services/test_aggregation_engine.py
import itertools

import pytest

from schemas.position import GroupKey
from services.aggregation_engine import group_key, group_trades, to_position_rows
from services.strategy_index import UNKNOWN_STRATEGY_NAME


def test_concrete_example_groups_into_one_bucket(make_trade):
    """Compra y venta del mismo bucket: open_qty se compensa y el PnL se suma."""
    trades = [
        make_trade(1, date_of_trade="2024-01-01", strategy_id=1, ticker="AAPL", time_horizon="1D",
                   open_qty=10, realised_pnl=0, unrealised_pnl=5),
        make_trade(2, date_of_trade="2024-01-01", strategy_id=1, ticker="AAPL", time_horizon="1D",
                   open_qty=-10, realised_pnl=100, unrealised_pnl=0),
    ]
    buckets = group_trades(trades)

    assert len(buckets) == 1
    bucket = buckets[GroupKey("2024-01-01", 1, "AAPL", "1D")]
    assert bucket.total_open_qty == 0
    assert bucket.total_realised_pnl == 100
    assert bucket.total_unrealised_pnl == 5
    assert bucket.total_pnl == 105
    assert bucket.trade_ids == [1, 2]
    assert bucket.trade_count == 2


def test_empty_input_gives_empty_mapping():
    assert group_trades([]) == {}


def test_bucket_order_follows_first_encounter(make_trade):
    trades = [
        make_trade(1, ticker="MSFT"),
        make_trade(2, ticker="AAPL"),
        make_trade(3, ticker="MSFT"),
        make_trade(4, ticker="TSLA"),
    ]
    keys = list(group_trades(trades).keys())
    assert [k.ticker for k in keys] == ["MSFT", "AAPL", "TSLA"]


@pytest.mark.parametrize("field,value", [
    ("date_of_trade", "2024-01-02"),
    ("strategy_id", 2),
    ("ticker", "MSFT"),
    ("time_horizon", "1W"),
])
def test_any_key_field_difference_splits_bucket(make_trade, field, value):
    trades = [make_trade(1), make_trade(2, **{field: value})]
    assert len(group_trades(trades)) == 2


def test_same_bucket_iff_all_key_fields_equal(sample_trades):
    buckets = group_trades(sample_trades)
    member_of = {tid: key for key, b in buckets.items() for tid in b.trade_ids}
    for t1, t2 in itertools.combinations(sample_trades, 2):
        same_key = group_key(t1) == group_key(t2)
        assert (member_of[t1.id] == member_of[t2.id]) == same_key


def test_sums_match_members_and_every_trade_counted_once(make_trade):
    trades = [
        make_trade(1, open_qty=5, realised_pnl=1.5, unrealised_pnl=-2.0),
        make_trade(2, open_qty=-3, realised_pnl=10.0, unrealised_pnl=0.25),
        make_trade(3, ticker="MSFT", open_qty=7, realised_pnl=0.0, unrealised_pnl=3.0),
        make_trade(4, open_qty=1, realised_pnl=-4.0, unrealised_pnl=1.0),
    ]
    buckets = group_trades(trades)
    by_id = {t.id: t for t in trades}

    all_ids = [tid for b in buckets.values() for tid in b.trade_ids]
    assert sorted(all_ids) == [1, 2, 3, 4]

    for bucket in buckets.values():
        members = [by_id[tid] for tid in bucket.trade_ids]
        assert bucket.total_open_qty == pytest.approx(sum(t.open_qty for t in members))
        assert bucket.total_realised_pnl == pytest.approx(sum(t.realised_pnl for t in members))
        assert bucket.total_unrealised_pnl == pytest.approx(sum(t.unrealised_pnl for t in members))


def test_representative_fields_come_from_first_trade(make_trade):
    trades = [make_trade(9, ticker="NVDA", strategy_id=2), make_trade(3, ticker="NVDA", strategy_id=2)]
    bucket = next(iter(group_trades(trades).values()))
    assert (bucket.date_of_trade, bucket.strategy_id, bucket.ticker, bucket.time_horizon) == ("2024-01-01", 2, "NVDA", "1D")
    assert bucket.trade_ids == [9, 3]


def test_input_is_not_mutated(sample_trades):
    before = [t.model_dump() for t in sample_trades]
    group_trades(sample_trades)
    assert [t.model_dump() for t in sample_trades] == before


def test_position_rows_resolve_strategy_names(make_trade, strategy_index):
    trades = [make_trade(1, strategy_id=1), make_trade(2, strategy_id=99)]
    rows = to_position_rows(group_trades(trades), strategy_index)
    assert [r.strategy_name for r in rows] == ["Momentum", UNKNOWN_STRATEGY_NAME]
    assert rows[0].total_pnl == rows[0].total_realised_pnl + rows[0].total_unrealised_pnl
