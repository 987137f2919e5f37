"""
Schematic
=========

Top-level object tying a block grid, its block entities and a target data
version together, with export to the Sponge ``.schem`` format.

Example:
    schem = Schematic(MC_1_18_2, 3, 3, 3)
    schem.set_block(1, 0, 0, BlockIdentifier.parse('minecraft:dirt'))
    with open('out.schem', 'wb') as f:
        schem.export(f)
"""

import logging
import nbtlib
from typing import BinaryIO, Dict, Tuple, Union

from mcschem.constants import DEFAULT_DATA_VERSION
from mcschem.core.block import BlockIdentifier
from mcschem.core.block_entity import BlockEntity
from mcschem.core.grid import VoxelGrid
from mcschem.formats.sponge import SchematicTreeBuilder, SpongeSchematicWriter

logger = logging.getLogger(__name__)

BlockLike = Union[BlockIdentifier, str]


class Schematic:
    """
    A schematic under construction.

    Attributes:
        data_version: Minecraft data version written to the file
        grid: Block storage
    """

    def __init__(self, data_version: int, size_x: int, size_y: int, size_z: int):
        """
        Create a schematic filled with ``minecraft:air``.

        Args:
            data_version: Minecraft data version, e.g. MC_1_18_2
            size_x, size_y, size_z: Grid dimensions (1-65535)
        """
        self.data_version = data_version
        self.grid = VoxelGrid(size_x, size_y, size_z)
        self._block_entities: Dict[Tuple[int, int, int], BlockEntity] = {}

    @property
    def size(self) -> Tuple[int, int, int]:
        return self.grid.size

    @property
    def block_entities(self) -> Dict[Tuple[int, int, int], BlockEntity]:
        """Registered block entities keyed by (x, y, z). Returns a copy."""
        return dict(self._block_entities)

    def set_block(self, x: int, y: int, z: int, block: BlockLike):
        """
        Set a block in the schematic.

        Args:
            x, y, z: Voxel coordinates
            block: BlockIdentifier or block string

        Raises:
            OutOfBoundsError: If the position is outside the grid
            ParseError: If ``block`` is a malformed string
        """
        self.grid.set(x, y, z, block)

    def get_block(self, x: int, y: int, z: int) -> BlockIdentifier:
        return self.grid.get(x, y, z)

    def fill(self, start: Tuple[int, int, int], end: Tuple[int, int, int], block: BlockLike):
        """Fill an inclusive box of the grid with one block."""
        self.grid.fill_region(start, end, block)

    def set_block_entity(self, x: int, y: int, z: int, entity: BlockEntity):
        """
        Attach a block entity to a voxel, replacing any existing one.

        Raises:
            OutOfBoundsError: If the position is outside the grid
        """
        position = self.grid.check_position(x, y, z)
        self._block_entities[position] = entity

    def remove_block_entity(self, x: int, y: int, z: int):
        self._block_entities.pop((x, y, z), None)

    def to_nbt(self) -> nbtlib.Compound:
        """Build the schematic tag tree without writing it."""
        return SchematicTreeBuilder.build(self.grid, self.data_version, self._block_entities)

    def export(self, writer: BinaryIO):
        """
        Export the schematic to a binary writer as gzipped NBT.

        Args:
            writer: Binary file-like object

        Raises:
            OSError: If writing fails
        """
        logger.debug("Exporting %r with %d block entities", self.grid, len(self._block_entities))
        SpongeSchematicWriter.write(self.to_nbt(), writer)

    def save(self, filepath: str):
        """
        Save the schematic to a .schem file.

        Args:
            filepath: Output file path
        """
        SpongeSchematicWriter.save(filepath, self.to_nbt())


def new_grid(data_version: int = DEFAULT_DATA_VERSION,
             size_x: int = 1, size_y: int = 1, size_z: int = 1) -> Schematic:
    """Create an empty, air-filled Schematic."""
    return Schematic(data_version, size_x, size_y, size_z)
