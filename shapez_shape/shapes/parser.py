"""Shape key parsing and validation."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import (
    EmptyLayer,
    InconsistentQuadrant,
    ParseError,
    UnknownColorCode,
    UnknownShapeCode,
)
from .scanner import LayerToken, QuadrantToken, ShapeKeyScanner
from .shape import Color, Layer, Quadrant, Shape, ShapeKind


@dataclass(frozen=True)
class ParseResult:
    """Outcome of checking a key: either a shape or the error that stopped it."""
    key: str
    shape: Optional[Shape] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ShapeCodeParser:
    """Parser for shapez shape keys."""

    @staticmethod
    def parse(code: str, allow_empty_layers: bool = False) -> Shape:
        """
        Parse a shape key into a Shape object.

        Format: LayerCode:LayerCode:... (bottom to top, 1 to 4 layers)
        Layer format: 4 part codes (starting top-right, clockwise)
        Part format: ShapeKindColor (e.g., "Cr" = red circle, "--" = empty)

        Args:
            code: The shape key
            allow_empty_layers: Accept layers whose quadrants are all empty

        Returns:
            The parsed Shape object

        Raises:
            ParseError: For the first problem found in the key
        """
        tokens = ShapeKeyScanner.scan(code)
        return ShapeCodeParser.build(tokens, key=code, allow_empty_layers=allow_empty_layers)

    @staticmethod
    def build(
        tokens: Sequence[LayerToken],
        key: str = "",
        allow_empty_layers: bool = False,
    ) -> Shape:
        """
        Build a Shape from scanned layer tokens.

        Stops at the first invalid quadrant or layer; no partial shape
        is ever returned.
        """
        layers = []
        for token in tokens:
            layers.append(ShapeCodeParser._build_layer(token, key, allow_empty_layers))
        return Shape(tuple(layers))

    @staticmethod
    def _build_layer(token: LayerToken, key: str, allow_empty_layers: bool) -> Layer:
        """Build a single layer from its token."""
        quadrants = [ShapeCodeParser._build_quadrant(q, key) for q in token.quadrants]
        layer = Layer(tuple(quadrants))
        if not allow_empty_layers and layer.is_empty():
            raise EmptyLayer(token.index, key, token.offset, len(token.text))
        return layer

    @staticmethod
    def _build_quadrant(token: QuadrantToken, key: str) -> Quadrant:
        """Build a single quadrant from its two characters."""
        try:
            kind = ShapeKind.from_code(token.shape_char)
        except ValueError:
            raise UnknownShapeCode(
                token.shape_char, token.layer_index, token.index, key, token.offset
            ) from None

        try:
            color = Color.from_code(token.color_char)
        except ValueError:
            raise UnknownColorCode(
                token.color_char, token.layer_index, token.index, key, token.offset + 1
            ) from None

        if kind.is_empty != color.is_none:
            raise InconsistentQuadrant(token.layer_index, token.index, key, token.offset)

        return Quadrant(kind, color)

    @staticmethod
    def check(code: str, allow_empty_layers: bool = False) -> ParseResult:
        """Parse a key, returning the shape or the error instead of raising."""
        try:
            shape = ShapeCodeParser.parse(code, allow_empty_layers=allow_empty_layers)
        except ParseError as e:
            return ParseResult(code, error=e)
        return ParseResult(code, shape=shape)

    @staticmethod
    def check_all(codes: Sequence[str], allow_empty_layers: bool = False) -> List[ParseResult]:
        """Check several keys independently."""
        return [
            ShapeCodeParser.check(code, allow_empty_layers=allow_empty_layers)
            for code in codes
        ]

    @staticmethod
    def validate(code: str) -> tuple[bool, Optional[str]]:
        """
        Validate a shape key.

        Returns:
            A tuple of (is_valid, error_message)
        """
        result = ShapeCodeParser.check(code)
        if result.ok:
            return True, None
        return False, str(result.error)

    @staticmethod
    def normalize(code: str) -> str:
        """Parse and re-encode a key."""
        return ShapeCodeParser.parse(code).to_code()


def parse_shape(code: str, allow_empty_layers: bool = False) -> Shape:
    """Parse a shape key. See ShapeCodeParser.parse."""
    return ShapeCodeParser.parse(code, allow_empty_layers=allow_empty_layers)
