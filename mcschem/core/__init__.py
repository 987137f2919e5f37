"""
mcschem Core Module
===================

Block, grid, palette and block entity data structures.
"""

from mcschem.core.block import BlockIdentifier
from mcschem.core.grid import VoxelGrid
from mcschem.core.palette import BlockPalette, PaletteBuilder
from mcschem.core.block_entity import BlockEntity, Barrel, RawBlockEntity, ItemSlot

__all__ = [
    'BlockIdentifier',
    'VoxelGrid',
    'BlockPalette',
    'PaletteBuilder',
    'BlockEntity',
    'Barrel',
    'RawBlockEntity',
    'ItemSlot',
]
