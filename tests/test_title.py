from plotspecs.title import OffsetSpecs, TitleSpecs


def test_offset_sequence():
    offset = OffsetSpecs()
    offset.shift_along_x(1)
    assert offset.repr() == "offset 1, 0"
    offset.shift_along_y(2)
    assert offset.repr() == "offset 1, 2"
    offset.shift_along_graph_x(0.3)
    assert offset.repr() == "offset graph 0.3, 2"
    offset.shift_along_graph_y(0.4)
    assert offset.repr() == "offset graph 0.3, graph 0.4"
    offset.shift_along_screen_x(0.5)
    assert offset.repr() == "offset screen 0.5, graph 0.4"
    offset.shift_along_screen_y(0.6)
    assert offset.repr() == "offset screen 0.5, screen 0.6"


def test_offset_default_is_empty():
    assert OffsetSpecs().repr() == ""


def test_offset_chaining_returns_self():
    offset = OffsetSpecs()
    assert offset.shift_along_x(3) is offset


def test_title_sequence():
    specs = TitleSpecs()
    specs.title("Hello")
    assert specs.repr() == "title 'Hello' enhanced textcolor '#404040'"
    specs.title_shift_along_x(1)
    assert specs.repr() == "title 'Hello' enhanced textcolor '#404040' offset 1, 0"
    specs.title_shift_along_y(2)
    assert specs.repr() == "title 'Hello' enhanced textcolor '#404040' offset 1, 2"
    specs.title_shift_along_graph_x(0.3)
    assert specs.repr() == "title 'Hello' enhanced textcolor '#404040' offset graph 0.3, 2"
    specs.title_shift_along_graph_y(0.4)
    assert (
        specs.repr()
        == "title 'Hello' enhanced textcolor '#404040' offset graph 0.3, graph 0.4"
    )
    specs.title_shift_along_screen_x(0.5)
    assert (
        specs.repr()
        == "title 'Hello' enhanced textcolor '#404040' offset screen 0.5, graph 0.4"
    )
    specs.title_shift_along_screen_y(0.6)
    assert (
        specs.repr()
        == "title 'Hello' enhanced textcolor '#404040' offset screen 0.5, screen 0.6"
    )
    specs.title_font_name("Arial")
    assert (
        specs.repr()
        == "title 'Hello' enhanced textcolor '#404040' font 'Arial,' offset screen 0.5, screen 0.6"
    )
    specs.title_font_size(13)
    assert (
        specs.repr()
        == "title 'Hello' enhanced textcolor '#404040' font 'Arial,13' offset screen 0.5, screen 0.6"
    )


def test_title_empty_by_default():
    assert TitleSpecs().repr() == ""


def test_title_text_color():
    specs = TitleSpecs().title("T").title_text_color("red")
    assert specs.repr() == "title 'T' enhanced textcolor 'red'"