"""
Schematic Errors
================

Exception types raised by the schematic builder.

Encoding failures (I/O errors on the output stream, values nbtlib refuses to
serialize) are not wrapped here; they reach the caller unchanged.
"""

from typing import Tuple


class SchematicError(Exception):
    """Base class for all errors raised by mcschem."""


class ParseError(SchematicError, ValueError):
    """A block string could not be parsed."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Invalid block string {text!r}: {reason}")
        self.text = text
        self.reason = reason


class MalformedBracketError(ParseError):
    """The property list was opened with '[' but never closed with ']'."""

    def __init__(self, text: str):
        super().__init__(text, "property list must end with ']'")


class MissingEqualsError(ParseError):
    """A property clause has no '=' separating key and value."""

    def __init__(self, text: str, clause: str):
        super().__init__(text, f"property {clause!r} is missing '='")
        self.clause = clause


class OutOfBoundsError(SchematicError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, position: Tuple[int, int, int], size: Tuple[int, int, int]):
        super().__init__(
            f"Position {position} is outside grid of size {size[0]}x{size[1]}x{size[2]}"
        )
        self.position = position
        self.size = size
