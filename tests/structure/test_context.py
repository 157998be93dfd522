"""
Tests for the immutable Context and its coordinate iterator.
"""

import itertools

import pytest

from magickscript.core.ranges import AxisRange, RangeSpec
from magickscript.exceptions import UndefinedVariableError, UnknownImageError
from magickscript.imaging.image import MagickImage
from magickscript.structure import Context, ContextFactory, iter_coordinates


def build(*lines: str) -> Context:
    factory = ContextFactory()
    for number, line in enumerate(lines, start=1):
        command, _, args = line.partition(" ")
        factory.run(command, args, line=number)
    return factory.build()


class TestCoordinates:
    """Test multi-axis iteration order."""

    def test_two_axes_first_registered_outermost(self):
        """Test the first registered axis varies slowest."""
        context = build("range x 0 6 2", "range y 0 4 2")
        assert list(context.coordinates()) == [
            {"x": 0, "y": 0},
            {"x": 0, "y": 2},
            {"x": 2, "y": 0},
            {"x": 2, "y": 2},
            {"x": 4, "y": 0},
            {"x": 4, "y": 2},
        ]

    def test_single_axis(self):
        """Test one axis yields one coordinate per value."""
        context = build("range a 0 6 3")
        assert list(context) == [{"a": 0}, {"a": 3}]

    def test_zero_axes_yield_one_empty_coordinate(self):
        """Test the product of no axes is a single empty coordinate."""
        assert list(Context().coordinates()) == [{}]

    def test_three_axes(self):
        """Test more than two axes nest in registration order."""
        context = build("range t 0 2 1", "range x 0 2 1", "range y 5 3 -1")
        expected = [
            {"t": t, "x": x, "y": y}
            for t, x, y in itertools.product(range(0, 2), range(0, 2), range(5, 3, -1))
        ]
        assert list(context) == expected

    def test_empty_axis_empties_product(self):
        """Test an empty range anywhere yields no coordinates."""
        context = build("range x 0 4 1", "range y 3 0 1")
        assert list(context) == []

    def test_passes_are_independent_and_identical(self):
        """Test each pass restarts and produces the same sequence."""
        context = build("range x 0 6 2", "range y 0 4 2")
        first = context.coordinates()
        next(first)
        assert list(context.coordinates()) == list(context.coordinates())
        assert len(list(first)) == 5

    def test_exhausted_pass_stays_exhausted(self):
        """Test an iterator is single pass."""
        iterator = build("range x 0 2 1").coordinates()
        assert len(list(iterator)) == 2
        assert list(iterator) == []

    def test_lazy_with_unbounded_axis(self):
        """Test the product is not materialized, even with an unbounded outer axis."""
        axes = (AxisRange("x", RangeSpec(0, None, 1)), AxisRange("y", RangeSpec(0, 2, 1)))
        head = list(itertools.islice(iter_coordinates(axes), 5))
        assert head == [
            {"x": 0, "y": 0},
            {"x": 0, "y": 1},
            {"x": 1, "y": 0},
            {"x": 1, "y": 1},
            {"x": 2, "y": 0},
        ]

    def test_coordinates_are_fresh_dicts(self):
        """Test mutating a yielded coordinate does not affect later ones."""
        coordinates = build("range x 0 2 1").coordinates()
        first = next(coordinates)
        first["x"] = 99
        assert next(coordinates) == {"x": 1}


class TestLookups:
    """Test variable and image access."""

    def test_get_var(self):
        """Test declared variables are readable."""
        context = build('var X="hello world"')
        assert context.get_var("X") == "hello world"
        assert context.has_var("X")

    def test_undefined_variable(self):
        """Test unknown variables raise UndefinedVariableError."""
        context = build('var X="1"')
        with pytest.raises(UndefinedVariableError) as exc_info:
            context.get_var("Y")
        assert exc_info.value.name == "Y"
        assert exc_info.value.available == ["X"]
        assert not context.has_var("Y")

    def test_get_img(self):
        """Test registered images are readable."""
        context = build("img b p.png")
        assert context.get_img("b") == MagickImage("p.png")
        assert context.has_img("b")

    def test_unknown_image(self):
        """Test unknown images raise UnknownImageError."""
        with pytest.raises(UnknownImageError, match="Unknown img: 'nope'"):
            build("img b p.png").get_img("nope")

    def test_bad_reference_only_fails_on_use(self):
        """Test building never validates references that are not read."""
        context = build("range x 0 1 1")
        assert list(context) == [{"x": 0}]


class TestImmutability:
    """Test the Context cannot be changed after build."""

    def test_tables_are_read_only(self):
        """Test variable and image tables reject assignment."""
        context = build('var A="1"', "img b p.png")
        with pytest.raises(TypeError):
            context.variables["A"] = "2"
        with pytest.raises(TypeError):
            context.images["c"] = MagickImage("c.png")

    def test_attributes_are_frozen(self):
        """Test Context attributes cannot be reassigned."""
        context = build("range x 0 2 1")
        with pytest.raises(AttributeError):
            context.axes = ()

    def test_axis_names(self):
        """Test axis names follow registration order."""
        assert build("range y 0 1 1", "range x 0 1 1").axis_names == ("y", "x")
