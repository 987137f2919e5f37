"""
mcschem Formats Module
======================

Encoders for the Sponge schematic format.
"""

from mcschem.formats.varint import VarintBlockDataEncoder
from mcschem.formats.sponge import SchematicTreeBuilder, SpongeSchematicWriter

__all__ = [
    'VarintBlockDataEncoder',
    'SchematicTreeBuilder',
    'SpongeSchematicWriter',
]
