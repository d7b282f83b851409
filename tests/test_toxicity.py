import pytest

from atomicmesh.toxicity import ToxicityTracker
from atomicmesh.types import Side


def test_vpin_balanced_is_zero():
    t = ToxicityTracker(100, 500, 6000)
    t.on_trade(Side.BUY, 100, 1000)
    t.on_trade(Side.SELL, 100, 1001)
    assert t.vpin() == 0
    assert not t.is_toxic()


def test_vpin_one_sided_is_max():
    t = ToxicityTracker(100, 500, 6000)
    for _ in range(10):
        t.on_trade(Side.BUY, 100, 1000)
    assert t.vpin() == 10000
    assert t.is_toxic()


def test_volatility_increases_on_price_move():
    t = ToxicityTracker(100, 5000, 6000)
    t.on_trade(Side.BUY, 100, 1000)
    t.on_trade(Side.BUY, 100, 1100)
    assert t.volatility() == 50


def test_first_trade_sets_no_volatility():
    t = ToxicityTracker(100, 5000, 6000)
    t.on_trade(Side.BUY, 100, 1000)
    assert t.volatility() == 0


def test_spread_multiplier_baseline():
    t = ToxicityTracker(100, 500, 6000)
    assert t.spread_multiplier() == 10000


def test_spread_multiplier_capped():
    t = ToxicityTracker(100, 10000, 6000)
    t.on_trade(Side.BUY, 100, 1000)
    t.on_trade(Side.BUY, 100, 2000)
    assert t.volatility() == 1000
    assert t.spread_multiplier() == 30000


def test_window_eviction():
    t = ToxicityTracker(3, 500, 6000)
    t.on_trade(Side.BUY, 100, 1000)
    t.on_trade(Side.BUY, 100, 1000)
    t.on_trade(Side.BUY, 100, 1000)
    t.on_trade(Side.SELL, 100, 1000)
    v = t.vpin()
    assert 3000 < v < 4000
    assert v == 3333


@pytest.mark.parametrize("threshold,expected", [(9999, True), (10000, False)])
def test_threshold_is_strict(threshold, expected):
    t = ToxicityTracker(10, 500, threshold)
    t.on_trade(Side.SELL, 5, 1000)
    assert t.vpin() == 10000
    assert t.is_toxic() is expected