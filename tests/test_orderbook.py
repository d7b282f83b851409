import pytest

from atomicmesh.orderbook import OrderBook
from atomicmesh.types import Level, Side, Symbol, Venue


@pytest.fixture
def book():
    return OrderBook(Symbol("BTC", "USDT", Venue.BINANCE))


def test_snapshot_and_best(book):
    bids = [Level(60000, 100), Level(59900, 200)]
    asks = [Level(60100, 150), Level(60200, 300)]
    book.apply_snapshot(bids, asks, 1, 1000)
    assert book.best_bid().price == 60000
    assert book.best_ask().price == 60100
    assert book.spread() == 100
    assert book.mid_price() == 60050
    assert book.last_update_seq == 1
    assert book.last_update_ts == 1000


def test_delta_removes_level(book):
    book.apply_snapshot([Level(100, 10)], [Level(101, 20)], 1, 1000)
    book.apply_delta([Level(100, 0)], [], 2, 2000)
    assert book.best_bid() is None
    assert book.spread() is None
    assert book.mid_price() is None
    assert book.last_update_seq == 2


def test_simulate_buy_fill(book):
    asks = [Level(100, 50), Level(101, 50), Level(102, 50)]
    book.apply_snapshot([], asks, 1, 1000)
    avg_price, filled = book.simulate_fill(Side.BUY, 80)
    assert filled == 80
    assert avg_price == 100


def test_simulate_fill_partial_liquidity(book):
    book.apply_snapshot([Level(99, 30)], [], 1, 0)
    assert book.simulate_fill(Side.SELL, 100) == (99, 30)


def test_simulate_fill_empty_side(book):
    assert book.simulate_fill(Side.BUY, 10) is None


def test_snapshot_drops_zero_levels(book):
    book.apply_snapshot([Level(100, 0), Level(99, 5)], [Level(101, 0)], 1, 0)
    assert book.bid_count() == 1
    assert book.ask_count() == 0


def test_snapshot_replaces_previous_levels(book):
    book.apply_snapshot([Level(100, 5)], [Level(101, 5)], 1, 0)
    book.apply_snapshot([Level(90, 5)], [Level(91, 5)], 2, 0)
    assert book.top_bids(10) == [Level(90, 5)]
    assert book.top_asks(10) == [Level(91, 5)]


def test_delta_updates_existing_level(book):
    book.apply_snapshot([Level(100, 5)], [], 1, 0)
    book.apply_delta([Level(100, 7), Level(98, 3)], [], 2, 0)
    assert book.top_bids(5) == [Level(100, 7), Level(98, 3)]


def test_top_levels_ordering(book):
    book.apply_snapshot(
        [Level(98, 1), Level(100, 2), Level(99, 3)],
        [Level(103, 1), Level(101, 2), Level(102, 3)],
        1,
        0,
    )
    assert [lv.price for lv in book.top_bids(2)] == [100, 99]
    assert [lv.price for lv in book.top_asks(2)] == [101, 102]


def test_depths(book):
    book.apply_snapshot(
        [Level(100, 2), Level(99, 3), Level(98, 4)],
        [Level(101, 5), Level(102, 6), Level(103, 7)],
        1,
        0,
    )
    assert book.bid_depth() == 9
    assert book.ask_depth() == 18
    assert book.bid_depth_to_price(99) == 5
    assert book.ask_depth_to_price(102) == 11
    assert book.bid_depth_to_price(50) == book.bid_depth()