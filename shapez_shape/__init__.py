"""Parse and validate shapez shape keys such as "RuCw--Cw:----Ru--"."""

from .shapes import Shape, ShapeCodeParser, ParseError, parse_shape

__version__ = "0.1.0"

__all__ = ["Shape", "ShapeCodeParser", "ParseError", "parse_shape"]
