import pytest

from atomicmesh.types import Level, Side, Symbol, Venue


def test_pair_is_independent_of_venue():
    a = Symbol("BTC", "USDT", Venue.BINANCE)
    b = Symbol("BTC", "USDT", Venue.BYBIT)
    assert a.pair() == b.pair()
    assert a != b


def test_pair_differs_by_quote():
    a = Symbol("BTC", "USDT", Venue.BINANCE)
    b = Symbol("BTC", "USDC", Venue.BINANCE)
    assert a.pair() != b.pair()
    assert "BTC" in a.pair()


def test_symbol_is_hashable_and_equal_by_value():
    a = Symbol("BTC", "USDT", Venue.SIMULATED)
    b = Symbol("BTC", "USDT", Venue.SIMULATED)
    assert {a: 1}[b] == 1


def test_level_equality():
    assert Level(100, 10) == Level(100, 10)
    assert Level(100, 10) != Level(100, 11)


def test_level_rejects_negative_qty():
    with pytest.raises(ValueError):
        Level(100, -1)


def test_sides_distinct():
    assert Side.BUY is not Side.SELL
    assert Side("buy") is Side.BUY