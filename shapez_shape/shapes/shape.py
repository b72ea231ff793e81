"""Core shape data structures."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple


# Key format conventions, shared by the parser, the encoder and diagnostics.
LAYER_SEPARATOR = ":"
EMPTY_CODE = "-"
MAX_LAYERS = 4
QUADS_PER_LAYER = 4
QUAD_CODE_LENGTH = 2
LAYER_CODE_LENGTH = QUADS_PER_LAYER * QUAD_CODE_LENGTH

# Quadrant 0 is top-right, continuing clockwise.
QUADRANT_POSITIONS = ("top-right", "bottom-right", "bottom-left", "top-left")
# The first layer in a key is the bottom one.
LAYER_ORDER = "bottom-up"


class ShapeKind(Enum):
    """Sub-shape types a quadrant can hold."""
    CIRCLE = "C"
    RECTANGLE = "R"
    STAR = "S"
    WINDMILL = "W"
    EMPTY = EMPTY_CODE

    @classmethod
    def from_code(cls, code: str) -> "ShapeKind":
        """Parse a shape kind from its code character."""
        for kind in cls:
            if kind.value == code:
                return kind
        raise ValueError(f"Unknown shape kind code: {code!r}")

    @property
    def is_empty(self) -> bool:
        return self is ShapeKind.EMPTY


class Color(Enum):
    """Colors a filled quadrant can carry."""
    RED = "r"
    GREEN = "g"
    BLUE = "b"
    YELLOW = "y"
    PURPLE = "p"
    CYAN = "c"
    WHITE = "w"
    UNCOLORED = "u"
    NONE = EMPTY_CODE  # Only valid on empty quadrants

    @classmethod
    def from_code(cls, code: str) -> "Color":
        """Parse a color from its code character."""
        for color in cls:
            if color.value == code:
                return color
        raise ValueError(f"Unknown color code: {code!r}")

    @property
    def is_none(self) -> bool:
        return self is Color.NONE


@dataclass(frozen=True)
class Quadrant:
    """One quarter of a layer: either empty or a colored sub-shape."""
    kind: ShapeKind
    color: Color

    def __post_init__(self):
        """Enforce that emptiness of kind and color agree."""
        if self.kind.is_empty != self.color.is_none:
            raise ValueError(
                f"Inconsistent quadrant: kind {self.kind.name} "
                f"cannot carry color {self.color.name}"
            )

    @classmethod
    def empty(cls) -> "Quadrant":
        """Create an empty quadrant."""
        return cls(ShapeKind.EMPTY, Color.NONE)

    @classmethod
    def filled(cls, kind: ShapeKind, color: Color) -> "Quadrant":
        """Create a filled quadrant; both values must be concrete."""
        if kind.is_empty or color.is_none:
            raise ValueError("A filled quadrant needs a concrete kind and color")
        return cls(kind, color)

    def is_empty(self) -> bool:
        return self.kind.is_empty

    def to_code(self) -> str:
        """Encode this quadrant to its two-character code."""
        return f"{self.kind.value}{self.color.value}"

    def __repr__(self) -> str:
        if self.is_empty():
            return "Quadrant.empty()"
        return f"Quadrant({self.kind.name}, {self.color.name})"


@dataclass(frozen=True)
class Layer:
    """A horizontal slice of a shape: exactly four positional quadrants."""
    quadrants: Tuple[Quadrant, ...]

    def __post_init__(self):
        quadrants = tuple(self.quadrants)
        if len(quadrants) != QUADS_PER_LAYER:
            raise ValueError(
                f"A layer needs exactly {QUADS_PER_LAYER} quadrants, got {len(quadrants)}"
            )
        # Normalise lists to tuples so layers stay hashable
        object.__setattr__(self, "quadrants", quadrants)

    @classmethod
    def empty(cls) -> "Layer":
        """Create a layer with all quadrants empty."""
        return cls(tuple(Quadrant.empty() for _ in range(QUADS_PER_LAYER)))

    def get_quadrant(self, index: int) -> Quadrant:
        """Get a quadrant by index (0 = top-right, going clockwise)."""
        return self.quadrants[index]

    def is_empty(self) -> bool:
        """Check if all quadrants are empty."""
        return all(quadrant.is_empty() for quadrant in self.quadrants)

    def to_code(self) -> str:
        """Encode this layer to its code string."""
        return "".join(quadrant.to_code() for quadrant in self.quadrants)

    def __iter__(self) -> Iterator[Quadrant]:
        return iter(self.quadrants)

    def __len__(self) -> int:
        return len(self.quadrants)


@dataclass(frozen=True)
class Shape:
    """A complete shape: one to four layers, bottom layer first."""
    layers: Tuple[Layer, ...]

    def __post_init__(self):
        layers = tuple(self.layers)
        if not 1 <= len(layers) <= MAX_LAYERS:
            raise ValueError(
                f"A shape needs between 1 and {MAX_LAYERS} layers, got {len(layers)}"
            )
        object.__setattr__(self, "layers", layers)

    @classmethod
    def from_code(cls, code: str, allow_empty_layers: bool = False) -> "Shape":
        """
        Parse a shape from its full key, raising ParseError if invalid.

        All-empty layers are rejected unless allow_empty_layers is set, so
        shapes built in code with such layers need it to round-trip.
        """
        from .parser import ShapeCodeParser
        return ShapeCodeParser.parse(code, allow_empty_layers=allow_empty_layers)

    @classmethod
    def from_layers(cls, layers: Sequence[Sequence[Quadrant]]) -> "Shape":
        """Build a shape from nested quadrant sequences."""
        return cls(tuple(Layer(tuple(quadrants)) for quadrants in layers))

    def to_code(self) -> str:
        """Encode this shape to its full key."""
        return LAYER_SEPARATOR.join(layer.to_code() for layer in self.layers)

    @property
    def num_layers(self) -> int:
        """Get the number of layers."""
        return len(self.layers)

    def get_layer(self, index: int) -> Optional[Layer]:
        """Get a layer by index (0 = bottom)."""
        if 0 <= index < len(self.layers):
            return self.layers[index]
        return None

    def __repr__(self) -> str:
        return f"Shape({self.to_code()})"
