"""Shape representation and parsing module."""

from .shape import Shape, Layer, Quadrant, ShapeKind, Color
from .scanner import ShapeKeyScanner, LayerToken, QuadrantToken
from .parser import ShapeCodeParser, ParseResult, parse_shape
from .encoder import ShapeCodeEncoder
from .errors import (
    ParseError,
    MalformedKey,
    WrongLayerCount,
    WrongQuadrantCount,
    UnknownShapeCode,
    UnknownColorCode,
    InconsistentQuadrant,
    EmptyLayer,
)

__all__ = [
    "Shape",
    "Layer",
    "Quadrant",
    "ShapeKind",
    "Color",
    "ShapeKeyScanner",
    "LayerToken",
    "QuadrantToken",
    "ShapeCodeParser",
    "ParseResult",
    "parse_shape",
    "ShapeCodeEncoder",
    "ParseError",
    "MalformedKey",
    "WrongLayerCount",
    "WrongQuadrantCount",
    "UnknownShapeCode",
    "UnknownColorCode",
    "InconsistentQuadrant",
    "EmptyLayer",
]
