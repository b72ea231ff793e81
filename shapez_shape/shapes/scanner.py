"""Splits shape keys into layer and quadrant tokens."""

from dataclasses import dataclass
from typing import List

from .errors import WrongLayerCount, WrongQuadrantCount
from .shape import LAYER_CODE_LENGTH, LAYER_SEPARATOR, MAX_LAYERS, QUAD_CODE_LENGTH


@dataclass(frozen=True)
class QuadrantToken:
    """Two characters of a key describing one quadrant."""
    shape_char: str
    color_char: str
    layer_index: int
    index: int
    offset: int  # Position of shape_char in the key

    @property
    def text(self) -> str:
        return self.shape_char + self.color_char


@dataclass(frozen=True)
class LayerToken:
    """One ``:``-separated segment of a key."""
    text: str
    index: int
    offset: int  # Position of the first character in the key

    @property
    def quadrants(self) -> List[QuadrantToken]:
        """Split this layer into its quadrant tokens, left to right."""
        tokens = []
        for i in range(0, len(self.text), QUAD_CODE_LENGTH):
            tokens.append(QuadrantToken(
                shape_char=self.text[i],
                color_char=self.text[i + 1],
                layer_index=self.index,
                index=i // QUAD_CODE_LENGTH,
                offset=self.offset + i,
            ))
        return tokens


class ShapeKeyScanner:
    """Structural scanner for shape keys."""

    @staticmethod
    def scan(key: str) -> List[LayerToken]:
        """
        Split a key into layer tokens and check its structure.

        Args:
            key: The raw shape key, e.g. "RuCw--Cw:----Ru--"

        Returns:
            One LayerToken per layer, in key order

        Raises:
            WrongLayerCount: If the key is empty or has too many layers
            WrongQuadrantCount: If a layer is not exactly 8 characters long
        """
        if not key:
            raise WrongLayerCount(0, MAX_LAYERS, key)

        segments = key.split(LAYER_SEPARATOR)
        if len(segments) > MAX_LAYERS:
            raise WrongLayerCount(len(segments), MAX_LAYERS, key)

        tokens = []
        offset = 0
        for index, segment in enumerate(segments):
            if len(segment) != LAYER_CODE_LENGTH:
                raise WrongQuadrantCount(index, len(segment), LAYER_CODE_LENGTH, key, offset)
            tokens.append(LayerToken(segment, index, offset))
            offset += len(segment) + len(LAYER_SEPARATOR)

        return tokens
