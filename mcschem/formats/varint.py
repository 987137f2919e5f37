"""
Varint Block Data
=================

Encodes palette indices as little-endian base-128 varints, the layout of the
Sponge schematic ``BlockData`` array.

Each byte carries 7 bits of the value, lowest group first; the high bit is
set on every byte except the last one of a value.
"""

import numpy as np
from typing import Iterable


class VarintBlockDataEncoder:
    """Varint encoder for block data index streams."""

    @staticmethod
    def encode_value(value: int, out: bytearray):
        """
        Append the varint encoding of a single value.

        Args:
            value: Non-negative integer
            out: Buffer to append to
        """
        if value < 0:
            raise ValueError(f"Cannot varint-encode negative value {value}")
        while value & ~0x7F:
            out.append((value & 0x7F) | 0x80)
            value >>= 7
        out.append(value)

    @classmethod
    def encode(cls, indices: Iterable[int]) -> bytes:
        """
        Encode a stream of palette indices.

        Args:
            indices: Palette indices in traversal order

        Returns:
            Concatenated varint bytes
        """
        if isinstance(indices, np.ndarray):
            if indices.size and indices.min() < 0:
                raise ValueError("Cannot varint-encode negative palette indices")
            # Every index below 128 is a single byte equal to the index
            if not indices.size or indices.max() < 0x80:
                return indices.astype(np.uint8).tobytes()

        out = bytearray()
        for value in indices:
            cls.encode_value(int(value), out)
        return bytes(out)
