import nbtlib
import pytest

from mcschem import Barrel, ItemSlot, RawBlockEntity, barrel_signal_strength


@pytest.mark.parametrize(
    "ss, slots",
    [(0, 0), (1, 1), (2, 2), (3, 4), (7, 12), (14, 25), (15, 27)],
)
def test_signal_strength_slot_count(ss, slots):
    assert len(barrel_signal_strength(ss)) == slots


def test_signal_strength_items():
    items = barrel_signal_strength(4)
    assert [item.slot for item in items] == list(range(len(items)))
    assert all(item.id == "minecraft:redstone_block" for item in items)
    assert all(item.count == 64 for item in items)


@pytest.mark.parametrize("ss", [-1, 16])
def test_signal_strength_range(ss):
    with pytest.raises(ValueError):
        barrel_signal_strength(ss)


def test_item_slot_validation():
    with pytest.raises(ValueError):
        ItemSlot(id="minecraft:stone", count=65)
    with pytest.raises(ValueError):
        ItemSlot(id="minecraft:stone", slot=-1)


def test_barrel_nbt():
    barrel = Barrel(items=[
        ItemSlot(id="minecraft:stone", count=3, slot=0),
        ItemSlot(id="minecraft:diamond_sword", slot=5,
                 extra=nbtlib.Compound({"Damage": nbtlib.Int(10)})),
    ])
    entry = barrel.to_nbt((1, 2, 3))

    assert list(entry["Pos"]) == [1, 2, 3]
    assert isinstance(entry["Pos"], nbtlib.IntArray)
    assert entry["Id"] == "minecraft:barrel"

    first, second = entry["Items"]
    assert first == {"Slot": 0, "id": "minecraft:stone", "Count": 3}
    assert "tag" not in first
    assert second["Slot"] == 5
    assert second["tag"]["Damage"] == 10


def test_barrel_rejects_bad_slots():
    with pytest.raises(ValueError):
        Barrel(items=[ItemSlot(id="minecraft:stone", slot=27)])
    with pytest.raises(ValueError):
        Barrel(items=[ItemSlot(id="a", slot=1), ItemSlot(id="b", slot=1)])


def test_barrel_with_signal_strength():
    assert len(Barrel.with_signal_strength(15).items) == 27


def test_raw_block_entity():
    sign = RawBlockEntity("minecraft:sign", nbtlib.Compound({
        "GlowingText": nbtlib.Byte(1),
        "Pos": nbtlib.IntArray([9, 9, 9]),
    }))
    entry = sign.to_nbt((0, 1, 0))

    assert entry["Id"] == "minecraft:sign"
    assert list(entry["Pos"]) == [0, 1, 0]
    assert entry["GlowingText"] == 1
