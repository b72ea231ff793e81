"""Tests for the shape data model and encoder."""

import dataclasses

import pytest
from shapez_shape.shapes.shape import (
    Color,
    Layer,
    Quadrant,
    QUADRANT_POSITIONS,
    Shape,
    ShapeKind,
)
from shapez_shape.shapes.encoder import ShapeCodeEncoder
from shapez_shape.shapes.parser import ShapeCodeParser


class TestCodeTables:
    """Tests for ShapeKind and Color code lookups."""

    @pytest.mark.parametrize("code,kind", [
        ("C", ShapeKind.CIRCLE),
        ("R", ShapeKind.RECTANGLE),
        ("S", ShapeKind.STAR),
        ("W", ShapeKind.WINDMILL),
        ("-", ShapeKind.EMPTY),
    ])
    def test_shape_kind_from_code(self, code, kind):
        assert ShapeKind.from_code(code) is kind

    @pytest.mark.parametrize("code,color", [
        ("r", Color.RED),
        ("g", Color.GREEN),
        ("b", Color.BLUE),
        ("y", Color.YELLOW),
        ("p", Color.PURPLE),
        ("c", Color.CYAN),
        ("w", Color.WHITE),
        ("u", Color.UNCOLORED),
        ("-", Color.NONE),
    ])
    def test_color_from_code(self, code, color):
        assert Color.from_code(code) is color

    @pytest.mark.parametrize("code", ["c", "X", "", "CC", "H"])
    def test_unknown_shape_kind(self, code):
        with pytest.raises(ValueError):
            ShapeKind.from_code(code)

    @pytest.mark.parametrize("code", ["R", "m", "", "rr"])
    def test_unknown_color(self, code):
        with pytest.raises(ValueError):
            Color.from_code(code)

    def test_codes_are_unique(self):
        assert len({kind.value for kind in ShapeKind}) == len(ShapeKind)
        assert len({color.value for color in Color}) == len(Color)


class TestQuadrant:
    """Tests for Quadrant."""

    def test_create_empty(self):
        quadrant = Quadrant.empty()
        assert quadrant.is_empty()
        assert quadrant.kind == ShapeKind.EMPTY
        assert quadrant.color == Color.NONE
        assert quadrant.to_code() == "--"

    def test_create_filled(self):
        quadrant = Quadrant.filled(ShapeKind.STAR, Color.PURPLE)
        assert not quadrant.is_empty()
        assert quadrant.to_code() == "Sp"

    def test_empty_kind_with_color_rejected(self):
        with pytest.raises(ValueError):
            Quadrant(ShapeKind.EMPTY, Color.RED)

    def test_filled_kind_without_color_rejected(self):
        with pytest.raises(ValueError):
            Quadrant(ShapeKind.CIRCLE, Color.NONE)

    def test_filled_requires_concrete_values(self):
        with pytest.raises(ValueError):
            Quadrant.filled(ShapeKind.EMPTY, Color.NONE)

    def test_is_immutable(self):
        quadrant = Quadrant(ShapeKind.CIRCLE, Color.RED)
        with pytest.raises(dataclasses.FrozenInstanceError):
            quadrant.color = Color.BLUE

    def test_equality_and_hash(self):
        a = Quadrant(ShapeKind.WINDMILL, Color.GREEN)
        b = Quadrant(ShapeKind.WINDMILL, Color.GREEN)
        assert a == b
        assert len({a, b}) == 1


class TestLayer:
    """Tests for Layer."""

    def test_create_empty(self):
        layer = Layer.empty()
        assert layer.is_empty()
        assert len(layer) == 4

    def test_requires_four_quadrants(self):
        with pytest.raises(ValueError):
            Layer((Quadrant.empty(),) * 3)
        with pytest.raises(ValueError):
            Layer((Quadrant.empty(),) * 5)

    def test_list_is_normalised_to_tuple(self):
        layer = Layer([Quadrant.empty()] * 4)
        assert isinstance(layer.quadrants, tuple)
        hash(layer)

    def test_order_is_preserved(self):
        quadrants = (
            Quadrant(ShapeKind.CIRCLE, Color.RED),
            Quadrant(ShapeKind.RECTANGLE, Color.GREEN),
            Quadrant(ShapeKind.STAR, Color.BLUE),
            Quadrant(ShapeKind.WINDMILL, Color.YELLOW),
        )
        layer = Layer(quadrants)
        assert layer.to_code() == "CrRgSbWy"
        assert layer.get_quadrant(2).kind == ShapeKind.STAR
        assert list(layer) == list(quadrants)


class TestShape:
    """Tests for Shape."""

    def test_from_code_single_layer(self):
        shape = Shape.from_code("CrCrCrCr")
        assert shape.num_layers == 1

    def test_from_code_multiple_layers(self):
        shape = Shape.from_code("CrCrCrCr:RgRgRgRg")
        assert shape.num_layers == 2
        assert shape.get_layer(1).to_code() == "RgRgRgRg"
        assert shape.get_layer(2) is None

    def test_requires_one_to_four_layers(self):
        with pytest.raises(ValueError):
            Shape(())
        with pytest.raises(ValueError):
            Shape((Layer.empty(),) * 5)

    def test_from_layers(self):
        red_circle = Quadrant(ShapeKind.CIRCLE, Color.RED)
        shape = Shape.from_layers([[red_circle] * 4])
        assert shape.to_code() == "CrCrCrCr"

    def test_to_code(self):
        shape = Shape.from_code("CuCuCuCu:RrRrRrRr")
        assert shape.to_code() == "CuCuCuCu:RrRrRrRr"

    def test_repr(self):
        assert repr(Shape.from_code("Cu------")) == "Shape(Cu------)"

    def test_structural_equality(self):
        assert Shape.from_code("RuCw--Cw") == Shape.from_code("RuCw--Cw")
        assert Shape.from_code("RuCw--Cw") != Shape.from_code("RuCw--Cr")
        assert hash(Shape.from_code("RuCw--Cw")) == hash(Shape.from_code("RuCw--Cw"))

    def test_is_immutable(self):
        shape = Shape.from_code("CuCuCuCu")
        with pytest.raises(dataclasses.FrozenInstanceError):
            shape.layers = ()


class TestShapeCodeEncoder:
    """Tests for ShapeCodeEncoder."""

    def test_encode_simple(self):
        shape = Shape.from_code("CuCuCuCu")
        assert ShapeCodeEncoder.encode(shape) == "CuCuCuCu"

    def test_encode_matches_to_code(self):
        shape = Shape.from_code("RuCw--Cw:----Ru--")
        assert ShapeCodeEncoder.encode(shape) == shape.to_code()

    def test_format_multiline_top_layer_first(self):
        shape = Shape.from_code("RuCw--Cw:----Ru--")
        text = ShapeCodeEncoder.format_for_display(shape, multiline=True)
        assert text.splitlines() == ["Layer 1: ----Ru--", "Layer 0: RuCw--Cw"]

    def test_format_single_line(self):
        shape = Shape.from_code("RuCw--Cw")
        assert ShapeCodeEncoder.format_for_display(shape) == "RuCw--Cw"

    def test_visual_grid(self):
        shape = Shape.from_code("CrRgSbWy")
        grid = ShapeCodeEncoder.to_visual_grid(shape)
        assert len(grid) == 1
        # Quadrant 0 is top-right, then clockwise
        assert grid[0] == [["Wy", "Cr"], ["Sb", "Rg"]]

    def test_describe_layer(self):
        layer = Shape.from_code("RuCw--Cw").layers[0]
        described = ShapeCodeEncoder.describe_layer(layer)
        assert list(described) == list(QUADRANT_POSITIONS)
        assert described["top-right"] == "uncolored rectangle"
        assert described["bottom-left"] == "empty"

    def test_to_source_rebuilds_shape(self):
        shape = Shape.from_code("RuCw--Cw:----Ru--")
        namespace = {
            "Shape": Shape,
            "Layer": Layer,
            "Quadrant": Quadrant,
            "ShapeKind": ShapeKind,
            "Color": Color,
        }
        rebuilt = eval(ShapeCodeEncoder.to_source(shape), namespace)
        assert rebuilt == shape

    def test_module_source_defines_constants(self):
        shapes = {
            "LOGO": Shape.from_code("RuCw--Cw:----Ru--"),
            "CIRCLE": Shape.from_code("CuCuCuCu"),
        }
        namespace = {}
        exec(ShapeCodeEncoder.to_module_source(shapes), namespace)
        assert namespace["LOGO"] == shapes["LOGO"]
        assert namespace["CIRCLE"] == shapes["CIRCLE"]

    @pytest.mark.parametrize("name", ["class", "Shape", "Color", "1X", "not-a-name"])
    def test_module_source_rejects_unusable_names(self, name):
        with pytest.raises(ValueError):
            ShapeCodeEncoder.to_module_source({name: Shape.from_code("CuCuCuCu")})


class TestRoundTrip:
    """Rendering a shape and parsing it back yields the same shape."""

    @pytest.mark.parametrize("code", [
        "CuCuCuCu",
        "RuCw--Cw:----Ru--",
        "CrRgSbWy:WpScRw--:--Cu----:Sy------",
        "Cr------:--Rg----:----Sb--:------Wy",
    ])
    def test_known_keys(self, code):
        shape = ShapeCodeParser.parse(code)
        assert ShapeCodeParser.parse(ShapeCodeEncoder.encode(shape)) == shape

    def test_every_filled_quadrant(self):
        for kind in ShapeKind:
            for color in Color:
                if kind.is_empty or color.is_none:
                    continue
                quadrant = Quadrant(kind, color)
                shape = Shape((Layer((quadrant, Quadrant.empty(), quadrant, Quadrant.empty())),))
                assert ShapeCodeParser.parse(shape.to_code()) == shape

    def test_empty_layer_round_trips_when_allowed(self):
        shape = Shape((Layer.empty(),))
        with pytest.raises(ValueError):
            Shape.from_code(shape.to_code())
        assert Shape.from_code(shape.to_code(), allow_empty_layers=True) == shape

    def test_parse_is_idempotent(self):
        code = "RuCw--Cw:----Ru--"
        assert ShapeCodeParser.parse(code) == ShapeCodeParser.parse(code)
