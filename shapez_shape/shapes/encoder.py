"""Shape key encoding utilities."""

import keyword
from typing import Dict, List, Optional

from .shape import LAYER_SEPARATOR, QUADRANT_POSITIONS, Layer, Quadrant, Shape

# Names imported by generated modules; constants may not reuse them.
GENERATED_IMPORTS = ("Color", "Layer", "Quadrant", "Shape", "ShapeKind")


class ShapeCodeEncoder:
    """Encoder for shapez shape keys."""

    @staticmethod
    def encode(shape: Shape) -> str:
        """
        Encode a Shape object into its canonical key.

        Args:
            shape: The Shape object to encode

        Returns:
            The encoded key, bottom layer first
        """
        return LAYER_SEPARATOR.join(
            ShapeCodeEncoder._encode_layer(layer) for layer in shape.layers
        )

    @staticmethod
    def _encode_layer(layer: Layer) -> str:
        """Encode a single layer."""
        return "".join(ShapeCodeEncoder._encode_quadrant(q) for q in layer.quadrants)

    @staticmethod
    def _encode_quadrant(quadrant: Quadrant) -> str:
        """Encode a single quadrant."""
        return f"{quadrant.kind.value}{quadrant.color.value}"

    @staticmethod
    def format_for_display(shape: Shape, multiline: bool = False) -> str:
        """
        Format a shape for human-readable display.

        Args:
            shape: The shape to format
            multiline: If True, show each layer on a separate line, top first

        Returns:
            Formatted string representation
        """
        code = ShapeCodeEncoder.encode(shape)

        if not multiline:
            return code

        lines = []
        for i, layer in enumerate(reversed(shape.layers)):
            layer_idx = len(shape.layers) - 1 - i
            layer_code = ShapeCodeEncoder._encode_layer(layer)
            lines.append(f"Layer {layer_idx}: {layer_code}")

        return "\n".join(lines)

    @staticmethod
    def describe_layer(layer: Layer) -> Dict[str, str]:
        """Map each quadrant position name to a readable description."""
        described = {}
        for position, quadrant in zip(QUADRANT_POSITIONS, layer.quadrants):
            if quadrant.is_empty():
                described[position] = "empty"
            else:
                described[position] = (
                    f"{quadrant.color.name.lower()} {quadrant.kind.name.lower()}"
                )
        return described

    @staticmethod
    def to_visual_grid(shape: Shape) -> List[List[List[str]]]:
        """
        Convert a shape to a 2x2 grid per layer for visualization.

        Quadrants are arranged:
          [3] [0]   (top)
          [2] [1]   (bottom)

        Returns:
            List of grids, one per layer (bottom to top)
        """
        grids = []
        for layer in shape.layers:
            q = [quadrant.to_code() for quadrant in layer.quadrants]
            grids.append([
                [q[3], q[0]],
                [q[2], q[1]],
            ])
        return grids

    @staticmethod
    def to_source(shape: Shape) -> str:
        """
        Render a shape as a Python expression that rebuilds it.

        The expression refers to Shape, Layer, Quadrant, ShapeKind and Color,
        which the surrounding generated code must import.
        """
        layer_sources = []
        for layer in shape.layers:
            quads = ", ".join(ShapeCodeEncoder._quadrant_source(q) for q in layer.quadrants)
            layer_sources.append(f"    Layer(({quads})),")
        return "Shape((\n" + "\n".join(layer_sources) + "\n))"

    @staticmethod
    def _quadrant_source(quadrant: Quadrant) -> str:
        if quadrant.is_empty():
            return "Quadrant.empty()"
        return f"Quadrant(ShapeKind.{quadrant.kind.name}, Color.{quadrant.color.name})"

    @staticmethod
    def constant_name_problem(name: str) -> Optional[str]:
        """Explain why a name cannot be a generated constant, or return None."""
        if not name.isidentifier():
            return f"'{name}' is not a valid Python identifier"
        if keyword.iskeyword(name):
            return f"'{name}' is a Python keyword"
        if name in GENERATED_IMPORTS:
            return f"'{name}' clashes with an imported name"
        return None

    @staticmethod
    def to_module_source(named_shapes: Dict[str, Shape]) -> str:
        """
        Render a Python module defining one constant per named shape.

        Raises:
            ValueError: If a name cannot be used as a constant
        """
        for name in named_shapes:
            problem = ShapeCodeEncoder.constant_name_problem(name)
            if problem:
                raise ValueError(problem)

        lines = [
            '"""Generated shape constants."""',
            "",
            "from shapez_shape.shapes.shape import " + ", ".join(GENERATED_IMPORTS),
            "",
        ]
        for name, shape in named_shapes.items():
            lines.append("")
            lines.append(f"# {shape.to_code()}")
            lines.append(f"{name} = {ShapeCodeEncoder.to_source(shape)}")
        return "\n".join(lines) + "\n"
