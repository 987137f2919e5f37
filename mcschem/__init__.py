"""
mcschem - Sponge Schematic Builder
==================================

Build a voxel grid of Minecraft blocks in memory and export it as a
Sponge schematic (.schem, version 2) for WorldEdit and similar tools.

Author: mcschem Team
Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "mcschem Team"
__license__ = "MIT"

from mcschem.constants import MC_1_18_2
from mcschem.core.block import AIR, BlockIdentifier
from mcschem.core.block_entity import Barrel, BlockEntity, ItemSlot, RawBlockEntity, barrel_signal_strength
from mcschem.errors import (
    MalformedBracketError,
    MissingEqualsError,
    OutOfBoundsError,
    ParseError,
    SchematicError,
)
from mcschem.schematic import Schematic, new_grid

__all__ = [
    'Schematic',
    'new_grid',
    'BlockIdentifier',
    'AIR',
    'BlockEntity',
    'Barrel',
    'RawBlockEntity',
    'ItemSlot',
    'barrel_signal_strength',
    'SchematicError',
    'ParseError',
    'MalformedBracketError',
    'MissingEqualsError',
    'OutOfBoundsError',
    'MC_1_18_2',
    '__version__',
]
