from atomicmesh.inventory import InventoryManager
from atomicmesh.types import Side


def make():
    return InventoryManager(100_000_000, 5000)


def test_fill_buy_increases_position():
    inv = make()
    inv.on_fill(Side.BUY, 10_000_000)
    assert inv.position == 10_000_000


def test_fill_sell_decreases_position():
    inv = make()
    inv.on_fill(Side.BUY, 10_000_000)
    inv.on_fill(Side.SELL, 3_000_000)
    assert inv.position == 7_000_000


def test_spot_clamp_no_negative():
    inv = make()
    inv.on_fill(Side.SELL, 10_000_000)
    assert inv.position == 0


def test_skew_flat_is_zero():
    assert make().compute_skew(7000) == 0


def test_skew_long_is_positive():
    inv = make()
    inv.on_fill(Side.BUY, 50_000_000)
    assert inv.compute_skew(7000) > 0


def test_skew_zero_max_inventory():
    inv = InventoryManager(0, 5000)
    inv.on_fill(Side.BUY, 10)
    assert inv.compute_skew(7000) == 0


def test_at_max_blocks_buying():
    inv = make()
    inv.on_fill(Side.BUY, 100_000_000)
    assert inv.at_max()
    assert inv.can_sell()


def test_sellable_qty_capped():
    inv = make()
    inv.on_fill(Side.BUY, 5_000_000)
    assert inv.sellable_qty(10_000_000) == 5_000_000
    assert inv.sellable_qty(1_000) == 1_000


def test_flat_cannot_sell():
    inv = make()
    assert not inv.can_sell()
    assert inv.sellable_qty(10) == 0


def test_set_position_clamps():
    inv = make()
    inv.set_position(-5)
    assert inv.position == 0
    inv.set_position(42)
    assert inv.position == 42