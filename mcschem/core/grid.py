"""
VoxelGrid - Block Storage
=========================

Fixed-size 3D grid of block identifiers.

Cells live in one flat numpy object array laid out in schematic order
(y outermost, then z, then x), so the flat index of a voxel is also its
position in the encoded block data.
"""

import operator
import numpy as np
from typing import Iterator, Tuple

from mcschem.constants import MAX_DIMENSION
from mcschem.core.block import AIR, BlockIdentifier, as_block
from mcschem.errors import OutOfBoundsError


Position = Tuple[int, int, int]


class VoxelGrid:
    """
    Dense block grid.

    Attributes:
        size: Tuple of (x, y, z) dimensions
    """

    def __init__(self, size_x: int, size_y: int, size_z: int):
        """
        Allocate a grid filled with ``minecraft:air``.

        Args:
            size_x: X dimension (schematic Width)
            size_y: Y dimension (schematic Height)
            size_z: Z dimension (schematic Length)

        Raises:
            ValueError: If a dimension is outside 1..65535
        """
        for name, value in (('size_x', size_x), ('size_y', size_y), ('size_z', size_z)):
            if not 1 <= value <= MAX_DIMENSION:
                raise ValueError(f"{name} must be between 1 and {MAX_DIMENSION}, got {value}")

        self.size: Tuple[int, int, int] = (size_x, size_y, size_z)
        self._cells = np.full(size_x * size_y * size_z, AIR, dtype=object)

    @property
    def size_x(self) -> int:
        return self.size[0]

    @property
    def size_y(self) -> int:
        return self.size[1]

    @property
    def size_z(self) -> int:
        return self.size[2]

    @property
    def volume(self) -> int:
        return len(self._cells)

    @property
    def blocks(self) -> np.ndarray:
        """View of the cells shaped (size_y, size_z, size_x)."""
        return self._cells.reshape(self.size_y, self.size_z, self.size_x)

    def index(self, x: int, y: int, z: int) -> int:
        """Flat buffer index of a voxel."""
        return (y * self.size_z + z) * self.size_x + x

    def is_valid_position(self, x: int, y: int, z: int) -> bool:
        """Check if coordinates are within the grid bounds."""
        return (0 <= x < self.size[0] and
                0 <= y < self.size[1] and
                0 <= z < self.size[2])

    def check_position(self, x: int, y: int, z: int) -> Position:
        """
        Validate a coordinate triple.

        Returns:
            The coordinates as plain ints

        Raises:
            TypeError: If a coordinate is not an integer
            OutOfBoundsError: If the position is outside the grid
        """
        x, y, z = operator.index(x), operator.index(y), operator.index(z)
        if not self.is_valid_position(x, y, z):
            raise OutOfBoundsError((x, y, z), self.size)
        return x, y, z

    def get(self, x: int, y: int, z: int) -> BlockIdentifier:
        """
        Get the block at the specified position.

        Raises:
            OutOfBoundsError: If the position is outside the grid
        """
        x, y, z = self.check_position(x, y, z)
        return self._cells[self.index(x, y, z)]

    def set(self, x: int, y: int, z: int, block: BlockIdentifier):
        """
        Set the block at the specified position.

        The grid is left untouched when the position is invalid.

        Args:
            x, y, z: Voxel coordinates
            block: BlockIdentifier or block string

        Raises:
            TypeError: If a coordinate is not an integer or block is not a block
            OutOfBoundsError: If the position is outside the grid
            ParseError: If block is a malformed block string
        """
        x, y, z = self.check_position(x, y, z)
        self._cells[self.index(x, y, z)] = as_block(block)

    def fill_region(self, start: Position, end: Position, block: BlockIdentifier):
        """
        Fill a box with a block, both corners inclusive.

        The box is clamped to the grid, so a region partly outside is filled
        only where it overlaps.

        Args:
            start: One corner (x, y, z)
            end: Opposite corner (x, y, z)
            block: Block to fill with
        """
        x1, y1, z1 = (max(0, min(start[i], end[i])) for i in range(3))
        x2, y2, z2 = (min(self.size[i], max(start[i], end[i]) + 1) for i in range(3))

        block = as_block(block)
        if x1 >= x2 or y1 >= y2 or z1 >= z2:
            return
        self.blocks[y1:y2, z1:z2, x1:x2] = block

    def traverse(self) -> Iterator[Tuple[Position, BlockIdentifier]]:
        """
        Iterate over every voxel in schematic order.

        Y is the outermost loop, then Z, then X. Consumers of the block data
        expect exactly this order. Each call starts a fresh pass.

        Yields:
            ((x, y, z), block) pairs
        """
        cells = self._cells
        i = 0
        for y in range(self.size_y):
            for z in range(self.size_z):
                for x in range(self.size_x):
                    yield (x, y, z), cells[i]
                    i += 1

    def __repr__(self) -> str:
        return f"VoxelGrid(size={self.size[0]}x{self.size[1]}x{self.size[2]})"
