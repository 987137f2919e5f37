"""
Block Entities
==============

Extra data attached to single voxels, such as container contents.

BlockEntity is an open set of variants: each subclass names its Minecraft
block entity id and writes its own payload. RawBlockEntity carries any other
kind as an opaque compound, so kinds without a dedicated class can still be
written.
"""

import nbtlib
from typing import ClassVar, List, Tuple
from dataclasses import dataclass, field

from mcschem.constants import CONTAINER_SLOTS, MAX_STACK_SIZE, SIGNAL_FILLER_ITEM


@dataclass
class ItemSlot:
    """
    One stack of items inside a container.

    Attributes:
        id: Namespaced item id
        extra: Item tag data, written as ``tag`` when not empty
        count: Stack size (0-64)
        slot: Slot index within the container
    """

    id: str
    extra: nbtlib.Compound = field(default_factory=nbtlib.Compound)
    count: int = 1
    slot: int = 0

    def __post_init__(self):
        if not 0 <= self.count <= MAX_STACK_SIZE:
            raise ValueError(f"Item count must be between 0 and {MAX_STACK_SIZE}, got {self.count}")
        if not 0 <= self.slot <= 127:
            raise ValueError(f"Slot index must be between 0 and 127, got {self.slot}")

    def to_nbt(self) -> nbtlib.Compound:
        item = nbtlib.Compound({
            'Slot': nbtlib.Byte(self.slot),
            'id': nbtlib.String(self.id),
            'Count': nbtlib.Byte(self.count),
        })
        if self.extra:
            item['tag'] = self.extra
        return item


class BlockEntity:
    """Base class for block entity variants."""

    ID: ClassVar[str] = ''

    def get_id(self) -> str:
        return self.ID

    def payload(self) -> nbtlib.Compound:
        """Variant specific fields, merged next to Pos and Id."""
        return nbtlib.Compound()

    def to_nbt(self, position: Tuple[int, int, int]) -> nbtlib.Compound:
        """
        Build the schematic entry for this block entity.

        Args:
            position: Grid coordinate (x, y, z) of the entity

        Returns:
            Compound with Pos, Id and the variant payload
        """
        entry = nbtlib.Compound({
            'Pos': nbtlib.IntArray([int(c) for c in position]),
            'Id': nbtlib.String(self.get_id()),
        })
        entry.update(self.payload())
        return entry


@dataclass
class Barrel(BlockEntity):
    """A barrel and its inventory."""

    ID: ClassVar[str] = 'minecraft:barrel'

    items: List[ItemSlot] = field(default_factory=list)

    def __post_init__(self):
        seen = set()
        for item in self.items:
            if item.slot >= CONTAINER_SLOTS:
                raise ValueError(f"Barrel has {CONTAINER_SLOTS} slots, got slot {item.slot}")
            if item.slot in seen:
                raise ValueError(f"Duplicate barrel slot {item.slot}")
            seen.add(item.slot)

    @classmethod
    def with_signal_strength(cls, signal_strength: int) -> 'Barrel':
        """Barrel whose comparator output equals ``signal_strength``."""
        return cls(items=barrel_signal_strength(signal_strength))

    def payload(self) -> nbtlib.Compound:
        return nbtlib.Compound({
            'Items': nbtlib.List[nbtlib.Compound]([item.to_nbt() for item in self.items]),
        })


@dataclass
class RawBlockEntity(BlockEntity):
    """
    Block entity of any kind, given as an id and a ready-made compound.

    Attributes:
        id: Namespaced block entity id
        data: Fields written next to Pos and Id
    """

    id: str
    data: nbtlib.Compound = field(default_factory=nbtlib.Compound)

    def get_id(self) -> str:
        return self.id

    def payload(self) -> nbtlib.Compound:
        return nbtlib.Compound({k: v for k, v in self.data.items() if k not in ('Pos', 'Id')})


def barrel_signal_strength(signal_strength: int) -> List[ItemSlot]:
    """
    Items that make a single-item container read a given comparator signal.

    The slot count is ``max(ss, ceil(ss * 27 / 14) - 2)``, each slot holding
    a full stack of redstone blocks.

    Args:
        signal_strength: Desired comparator output (0-15)

    Returns:
        List of ItemSlot, slots numbered from 0

    Raises:
        ValueError: If signal_strength is outside 0-15
    """
    if not 0 <= signal_strength <= 15:
        raise ValueError(f"Signal strength must be between 0 and 15, got {signal_strength}")

    n = max(signal_strength, -(-signal_strength * CONTAINER_SLOTS // 14) - 2)
    return [ItemSlot(id=SIGNAL_FILLER_ITEM, count=MAX_STACK_SIZE, slot=i) for i in range(n)]
