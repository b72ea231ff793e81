"""Errors raised while parsing shape keys.

Every error records the key it was raised for and the ``(start, end)``
character span of the offending text, so callers can point at it.
Indices stored on the errors are 0-based; messages use ordinals.
"""

from typing import Optional, Tuple


def ordinal(index: int) -> str:
    """Format a 0-based index as a 1-based ordinal ("1st", "2nd", ...)."""
    n = index + 1
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def quad_location(layer_index: int, quadrant_index: int) -> str:
    return f"{ordinal(layer_index)} layer, {ordinal(quadrant_index)} quad"


class ParseError(ValueError):
    """Base class for all shape key errors."""

    def __init__(self, message: str, key: str = "", span: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.span = span if span is not None else (0, len(key))
        # Subclasses store their own constructor arguments so errors unpickle
        self.args = (message, key, span)

    def __str__(self) -> str:
        return self.message

    def format_diagnostic(self) -> str:
        """
        Format the error with the key and a caret line under the span.

        Example:
            Invalid sub-shape "X" in 1st layer, 4th quad
              Ru--CwXy
                    ^
        """
        start, end = self.span
        width = max(end - start, 1)
        lines = [
            self.message,
            f"  {self.key}",
            "  " + " " * start + "^" * width,
        ]
        return "\n".join(lines)


class MalformedKey(ParseError):
    """Structural error: the key does not split into valid layers."""


class WrongLayerCount(MalformedKey):
    """The key has fewer than one or more than the maximum layers."""

    def __init__(self, count: int, max_layers: int, key: str = ""):
        if count == 0:
            message = "Empty input"
        else:
            message = f"Input has more than {max_layers} layers ({count})"
        super().__init__(message, key, (0, len(key)))
        self.count = count
        self.args = (count, max_layers, key)


class WrongQuadrantCount(MalformedKey):
    """A layer is not exactly four quadrants long."""

    def __init__(self, layer_index: int, length: int, expected: int,
                 key: str = "", offset: int = 0):
        if length % 2:
            detail = "has odd number of characters"
        elif length > expected:
            detail = f"has more than {expected} characters"
        else:
            detail = f"has fewer than {expected} characters"
        message = f"{ordinal(layer_index)} layer {detail} ({length})"
        super().__init__(message, key, (offset, offset + length))
        self.layer_index = layer_index
        self.length = length
        self.args = (layer_index, length, expected, key, offset)


class UnknownShapeCode(ParseError):
    """A quadrant's first character is not a known sub-shape code."""

    def __init__(self, char: str, layer_index: int, quadrant_index: int,
                 key: str = "", offset: int = 0):
        message = f'Invalid sub-shape "{char}" in {quad_location(layer_index, quadrant_index)}'
        super().__init__(message, key, (offset, offset + 1))
        self.char = char
        self.layer_index = layer_index
        self.quadrant_index = quadrant_index
        self.args = (char, layer_index, quadrant_index, key, offset)


class UnknownColorCode(ParseError):
    """A quadrant's second character is not a known color code."""

    def __init__(self, char: str, layer_index: int, quadrant_index: int,
                 key: str = "", offset: int = 0):
        message = f'Invalid color "{char}" in {quad_location(layer_index, quadrant_index)}'
        super().__init__(message, key, (offset, offset + 1))
        self.char = char
        self.layer_index = layer_index
        self.quadrant_index = quadrant_index
        self.args = (char, layer_index, quadrant_index, key, offset)


class InconsistentQuadrant(ParseError):
    """Exactly one of a quadrant's two characters is the empty marker."""

    def __init__(self, layer_index: int, quadrant_index: int,
                 key: str = "", offset: int = 0):
        message = (
            f"Inconsistent quad in {quad_location(layer_index, quadrant_index)}: "
            f"sub-shape and color must both be empty or both be set"
        )
        super().__init__(message, key, (offset, offset + 2))
        self.layer_index = layer_index
        self.quadrant_index = quadrant_index
        self.args = (layer_index, quadrant_index, key, offset)


class EmptyLayer(ParseError):
    """Every quadrant of a layer is empty."""

    def __init__(self, layer_index: int, key: str = "", offset: int = 0, length: int = 0):
        message = f"{ordinal(layer_index)} layer is empty"
        super().__init__(message, key, (offset, offset + length))
        self.layer_index = layer_index
        self.args = (layer_index, key, offset, length)
