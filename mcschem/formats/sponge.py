"""
Sponge Schematic Format
=======================

Builds the Sponge schematic (version 2) tag tree for a grid and writes it as
gzipped NBT through nbtlib.

Tree layout:
- Version, DataVersion, PaletteMax: Int
- Metadata: empty Compound
- Width, Height, Length: Short (unsigned values stored in a signed short)
- Palette: Compound of block string -> Int index
- BlockData: ByteArray of varint palette indices, YZX order
- BlockEntities: List of Compound, each with Pos, Id and variant fields
"""

import gzip
import logging
import numpy as np
import nbtlib
from typing import BinaryIO, Dict, Mapping, Tuple

from mcschem.constants import ROOT_NAME, SCHEMATIC_VERSION
from mcschem.core.block_entity import BlockEntity
from mcschem.core.grid import VoxelGrid
from mcschem.core.palette import PaletteBuilder
from mcschem.formats.varint import VarintBlockDataEncoder

logger = logging.getLogger(__name__)


def _short(value: int) -> nbtlib.Short:
    """Store an unsigned 16-bit dimension in a signed Short."""
    return nbtlib.Short(value - 0x10000 if value > 0x7FFF else value)


class SchematicTreeBuilder:
    """Assembles the schematic tag tree."""

    @classmethod
    def build(cls, grid: VoxelGrid, data_version: int,
              block_entities: Mapping[Tuple[int, int, int], BlockEntity] = None) -> nbtlib.Compound:
        """
        Build the full schematic tree for a grid.

        Args:
            grid: Grid to encode
            data_version: Minecraft data version of the block data
            block_entities: Block entities keyed by (x, y, z)

        Returns:
            Root compound, ready for nbtlib to write
        """
        palette = PaletteBuilder.build(grid)
        block_data = VarintBlockDataEncoder.encode(palette.indices)

        logger.debug("Encoded %d voxels: %d palette entries, %d bytes of block data",
                     grid.volume, len(palette), len(block_data))

        return cls.assemble(
            size=grid.size,
            data_version=data_version,
            palette=palette.mapping(),
            block_data=block_data,
            block_entities=block_entities or {},
        )

    @classmethod
    def assemble(cls, size: Tuple[int, int, int], data_version: int,
                 palette: Dict[str, int], block_data: bytes,
                 block_entities: Mapping[Tuple[int, int, int], BlockEntity]) -> nbtlib.Compound:
        """Fold already-encoded parts into the schematic compound."""
        width, height, length = size

        # Entities in the same YZX order as the block data
        entities = [
            block_entities[pos].to_nbt(pos)
            for pos in sorted(block_entities, key=lambda p: (p[1], p[2], p[0]))
        ]

        return nbtlib.Compound({
            'Version': nbtlib.Int(SCHEMATIC_VERSION),
            'DataVersion': nbtlib.Int(data_version),
            'Metadata': nbtlib.Compound(),
            'Width': _short(width),
            'Height': _short(height),
            'Length': _short(length),
            'PaletteMax': nbtlib.Int(len(palette) - 1),
            'Palette': nbtlib.Compound({name: nbtlib.Int(idx) for name, idx in palette.items()}),
            'BlockData': nbtlib.ByteArray(np.frombuffer(block_data, dtype=np.int8).copy()),
            'BlockEntities': nbtlib.List[nbtlib.Compound](entities),
        })


class SpongeSchematicWriter:
    """Writes schematic trees as gzipped NBT."""

    @classmethod
    def write(cls, tree: nbtlib.Compound, writer: BinaryIO):
        """
        Write a schematic tree to a binary stream.

        Errors raised by the stream or by nbtlib propagate unchanged.

        Args:
            tree: Root compound from SchematicTreeBuilder
            writer: Binary file-like object
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Schematic tree: %s", nbtlib.serialize_tag(tree, indent=2))

        nbt_file = nbtlib.File(tree, root_name=ROOT_NAME)
        with gzip.GzipFile(fileobj=writer, mode='wb') as buff:
            nbt_file.write(buff)

    @classmethod
    def save(cls, filepath: str, tree: nbtlib.Compound):
        """
        Save a schematic tree to a .schem file.

        Args:
            filepath: Output file path
            tree: Root compound from SchematicTreeBuilder
        """
        with open(filepath, 'wb') as f:
            cls.write(tree, f)
        logger.info("Saved schematic to %s", filepath)
