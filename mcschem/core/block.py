"""
Block Identifiers
=================

Parsing and canonical formatting of block state strings such as
``minecraft:oak_log[axis=y]``.

Properties are always kept in sorted key order, so two identifiers with the
same id and property set produce the same canonical string. The palette relies
on this to use the string as a lookup key.
"""

from types import MappingProxyType
from typing import Dict, Mapping
from dataclasses import dataclass, field

from mcschem.constants import AIR_ID
from mcschem.errors import MalformedBracketError, MissingEqualsError


@dataclass(frozen=True)
class BlockIdentifier:
    """
    A block id together with its block state properties.

    Attributes:
        id: Namespaced block id, e.g. ``minecraft:stone``
        properties: Read-only property map, iterated in sorted key order
    """

    id: str
    properties: Mapping[str, str] = field(default_factory=dict, compare=False)
    _canonical: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Freeze properties in sorted key order and cache the canonical string."""
        ordered = {str(k): str(v) for k, v in sorted(self.properties.items())}
        object.__setattr__(self, 'properties', MappingProxyType(ordered))

        canonical = self.id
        if ordered:
            canonical += '[' + ','.join(f"{k}={v}" for k, v in ordered.items()) + ']'
        object.__setattr__(self, '_canonical', canonical)

    @classmethod
    def parse(cls, text: str) -> 'BlockIdentifier':
        """
        Parse a block string of the form ``id`` or ``id[k=v,k=v]``.

        The id is not checked against any block registry. When a key is
        repeated the last value wins.

        Args:
            text: Block string to parse

        Returns:
            Parsed BlockIdentifier

        Raises:
            MalformedBracketError: If '[' is present but the text does not end with ']'
            MissingEqualsError: If a property clause has no '='
        """
        if '[' not in text:
            return cls(text)

        block_id, rest = text.split('[', 1)
        if not rest.endswith(']'):
            raise MalformedBracketError(text)

        properties: Dict[str, str] = {}
        for clause in rest[:-1].split(','):
            if '=' not in clause:
                raise MissingEqualsError(text, clause)
            key, value = clause.split('=', 1)
            properties[key] = value

        return cls(block_id, properties)

    def with_properties(self, **properties: str) -> 'BlockIdentifier':
        """Return a copy with the given properties added or replaced."""
        merged = dict(self.properties)
        merged.update(properties)
        return BlockIdentifier(self.id, merged)

    def canonical_string(self) -> str:
        """
        Format as ``id`` or ``id[k1=v1,k2=v2]`` with keys in sorted order.

        Returns:
            Canonical block string, used as the palette key
        """
        return self._canonical

    @property
    def is_air(self) -> bool:
        return self.id == AIR_ID and not self.properties

    def __str__(self) -> str:
        return self.canonical_string()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BlockIdentifier):
            return NotImplemented
        return self.id == other.id and dict(self.properties) == dict(other.properties)

    def __hash__(self) -> int:
        return hash(self._canonical)


def as_block(block) -> BlockIdentifier:
    """Accept either a BlockIdentifier or a block string."""
    if isinstance(block, BlockIdentifier):
        return block
    if isinstance(block, str):
        return BlockIdentifier.parse(block)
    raise TypeError(f"Expected BlockIdentifier or str, got {type(block).__name__}")


AIR = BlockIdentifier(AIR_ID)
