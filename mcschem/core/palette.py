"""
BlockPalette - Palette Construction
===================================

Deduplicates the blocks of a grid into a dense palette.

Indices are handed out in order of first appearance during traversal, so the
same grid always produces the same palette and the same index stream.
"""

import numpy as np
from typing import Dict, List
from dataclasses import dataclass, field

from mcschem.core.block import BlockIdentifier
from mcschem.core.grid import VoxelGrid


@dataclass
class BlockPalette:
    """
    Palette built from one pass over a grid.

    Attributes:
        blocks: Distinct blocks in first-seen order; list position is the index
        indices: Palette index of every voxel, in traversal order
    """

    blocks: List[BlockIdentifier] = field(default_factory=list)
    indices: np.ndarray = field(default=None, repr=False)
    _lookup: Dict[str, int] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if self.indices is None:
            self.indices = np.zeros(0, dtype=np.int32)

    def __len__(self) -> int:
        return len(self.blocks)

    def index_of(self, block: BlockIdentifier) -> int:
        """
        Get the palette index of a block, adding it if unseen.

        Args:
            block: Block to look up

        Returns:
            Palette index
        """
        key = block.canonical_string()
        idx = self._lookup.get(key)
        if idx is None:
            idx = len(self.blocks)
            self._lookup[key] = idx
            self.blocks.append(block)
        return idx

    @property
    def max_index(self) -> int:
        return len(self.blocks) - 1

    def mapping(self) -> Dict[str, int]:
        """Canonical block string to palette index, in index order."""
        return dict(self._lookup)


class PaletteBuilder:
    """Builds a BlockPalette and index stream from a VoxelGrid."""

    @classmethod
    def build(cls, grid: VoxelGrid) -> BlockPalette:
        """
        Assign palette indices to every voxel of the grid.

        Args:
            grid: Grid to scan

        Returns:
            BlockPalette with one index per voxel
        """
        palette = BlockPalette()
        indices = np.empty(grid.volume, dtype=np.int32)

        for i, (_, block) in enumerate(grid.traverse()):
            indices[i] = palette.index_of(block)

        palette.indices = indices
        return palette
