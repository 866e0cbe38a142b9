# tests/services/test_trade_ledger.py
from services.trade_ledger import TradeLedger, merge_updated_trades


def test_merge_replaces_only_ids_in_response(make_trade):
    local = [make_trade(7), make_trade(9), make_trade(12)]
    updated = [
        make_trade(9, open_qty=0, realised_pnl=50.0, matched_trade_ids="7"),
        make_trade(7, open_qty=0, realised_pnl=50.0, matched_trade_ids="9"),
    ]
    merged = merge_updated_trades(local, updated)

    assert [t.id for t in merged] == [7, 9, 12] # Orden local conservado
    assert merged[0] is updated[1]
    assert merged[1] is updated[0]
    assert merged[2] is local[2]


def test_merge_ignores_unknown_ids(make_trade):
    local = [make_trade(1), make_trade(2)]
    merged = merge_updated_trades(local, [make_trade(99, realised_pnl=1.0)])
    assert [t.id for t in merged] == [1, 2]
    assert all(a is b for a, b in zip(merged, local))


def test_merge_with_duplicate_ids_uses_first(make_trade):
    local = [make_trade(1)]
    first = make_trade(1, realised_pnl=10.0)
    second = make_trade(1, realised_pnl=20.0)
    assert merge_updated_trades(local, [first, second])[0] is first


def test_merge_does_not_mutate_local_list(make_trade):
    local = [make_trade(1), make_trade(2)]
    snapshot = list(local)
    merge_updated_trades(local, [make_trade(1, realised_pnl=3.0)])
    assert local == snapshot
    assert all(a is b for a, b in zip(local, snapshot))


def test_ledger_merge_counts_replacements(make_trade):
    ledger = TradeLedger([make_trade(1), make_trade(2), make_trade(3)])
    replaced = ledger.merge([make_trade(2, realised_pnl=4.0), make_trade(3, realised_pnl=1.0)])
    assert replaced == 2
    assert ledger.get(2).realised_pnl == 4.0
    assert ledger.get(1).realised_pnl == 0.0


def test_ledger_remove_and_replace_all(make_trade):
    ledger = TradeLedger([make_trade(1), make_trade(2)])
    assert ledger.remove(1) is True
    assert ledger.remove(1) is False
    assert [t.id for t in ledger.trades] == [2]

    ledger.replace_all([make_trade(5)])
    assert len(ledger) == 1
    assert ledger.get(2) is None


def test_ledger_trades_returns_a_copy(make_trade):
    ledger = TradeLedger([make_trade(1)])
    trades = ledger.trades
    trades.clear()
    assert len(ledger) == 1


def test_ledger_version_changes_on_every_mutation(make_trade):
    ledger = TradeLedger([make_trade(1), make_trade(2)])
    start = ledger.version

    ledger.merge([make_trade(1, realised_pnl=2.0)])
    assert ledger.version == start + 1

    ledger.remove(2)
    ledger.remove(2) # no existe: no cuenta como cambio
    assert ledger.version == start + 2

    ledger.replace_all([make_trade(3)])
    assert ledger.version == start + 3
