import gzip
import io

import nbtlib
import pytest

from mcschem import BlockIdentifier, Schematic, MC_1_18_2


def _decode(data: bytes) -> nbtlib.File:
    with gzip.GzipFile(fileobj=io.BytesIO(data)) as f:
        return nbtlib.File.parse(f)


@pytest.fixture
def decode():
    """Parse gzipped schematic bytes back into an nbtlib tree."""
    return _decode


@pytest.fixture
def small_schematic():
    """3x3x3 air schematic with dirt, stone and grass placed along the axes."""
    schem = Schematic(MC_1_18_2, 3, 3, 3)
    schem.set_block(1, 0, 0, BlockIdentifier.parse("minecraft:dirt"))
    schem.set_block(0, 1, 0, BlockIdentifier.parse("minecraft:stone"))
    schem.set_block(0, 0, 1, BlockIdentifier.parse("minecraft:grass_block"))
    return schem
