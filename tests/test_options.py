import pytest

from plotspecs.options import (
    FilledCurvesSpecs,
    LineSpecs,
    PointSpecs,
    ShowSpecs,
    collapse_whitespace,
)


def test_filled_curves_specs():
    specs = FilledCurvesSpecs()
    assert specs.repr() == ""

    specs.above()
    assert specs.repr() == "above"

    specs.below()
    assert specs.repr() == "below"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("   ", ""),
        ("  a   b  ", "a b"),
        ("set grid  front ", "set grid front"),
    ],
)
def test_collapse_whitespace(text, expected):
    assert collapse_whitespace(text) == expected


def test_line_specs_empty_by_default():
    assert LineSpecs().repr() == ""


def test_line_specs_all_options_in_order():
    specs = LineSpecs()
    specs.dash_type(9).line_color("red").line_width(5).line_type(4).line_style(7)
    assert specs.repr() == "linestyle 7 linetype 4 linewidth 5 linecolor 'red' dashtype 9"


def test_line_specs_partial():
    specs = LineSpecs().line_width(3).line_color("orange")
    assert specs.repr() == "linewidth 3 linecolor 'orange'"


def test_line_specs_setter_overwrites():
    specs = LineSpecs().line_width(2)
    specs.line_width(3)
    assert specs.repr() == "linewidth 3"


def test_point_specs():
    specs = PointSpecs()
    assert specs.repr() == ""
    specs.point_size(2)
    assert specs.repr() == "pointsize 2"
    specs.point_type(3)
    assert specs.repr() == "pointtype 3 pointsize 2"


def test_show_specs():
    specs = ShowSpecs()
    assert specs.repr() == ""
    assert specs.is_hidden() is False

    specs.hide()
    assert specs.repr() == "no"
    assert specs.is_hidden() is True

    specs.show()
    assert specs.repr() == ""

    specs.show(False)
    assert specs.is_hidden() is True


def test_setters_return_same_object():
    specs = LineSpecs()
    assert specs.line_style(1) is specs
    shown = ShowSpecs()
    assert shown.hide() is shown


def test_mixins_combine_without_clashing():
    class Combined(LineSpecs, PointSpecs, FilledCurvesSpecs, ShowSpecs):
        pass

    specs = Combined().line_width(2).point_type(5).above().hide()
    assert LineSpecs.repr(specs) == "linewidth 2"
    assert PointSpecs.repr(specs) == "pointtype 5"
    assert FilledCurvesSpecs.repr(specs) == "above"
    assert ShowSpecs.repr(specs) == "no"