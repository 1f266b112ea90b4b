from catalog.normalizers.dimensions import normalize_dimensions, render_value


def test_structured_pairs():
    dims = {"h": {"value": 26, "unit": "in"}, "w": {"value": 21, "unit": "in"}}
    assert normalize_dimensions(dims) == "H 26 in × W 21 in"


def test_placeholder_display_falls_back_to_synthesis():
    assert normalize_dimensions({"display": "?", "h": 10, "unit": "cm"}) == "H 10 cm"
    assert normalize_dimensions({"display": " Unknown ", "w": 3}) == "W 3"


def test_display_wins_when_usable():
    assert normalize_dimensions({"display": " 30 x 20 in ", "h": 99}) == "30 x 20 in"


def test_diameter_and_wingspan_put_the_unit_first():
    assert normalize_dimensions({"diameter": 12, "unit": "in"}) == "12 in diameter"
    assert normalize_dimensions({"wingspan": "40 in"}) == "40 in wingspan"


def test_fixed_order_and_default_unit():
    dims = {
        "wingspan": "5 ft",
        "diameter": {"value": 12},
        "l": 4,
        "d": {"value": 2.5, "unit": "cm"},
        "w": "3 in",
        "h": 1,
        "unit": "mm",
    }
    assert normalize_dimensions(dims) == (
        "H 1 mm × W 3 in × D 2.5 cm × L 4 mm × 12 mm diameter × 5 ft wingspan"
    )


def test_question_mark_parts_are_dropped():
    assert normalize_dimensions({"h": "?", "w": {"value": 21, "unit": "in"}}) == "W 21 in"
    assert normalize_dimensions({"h": "? in", "d": {"value": "?", "unit": "cm"}}) is None


def test_nothing_usable_is_absent():
    assert normalize_dimensions({}) is None
    assert normalize_dimensions(None) is None
    assert normalize_dimensions("26 in") is None
    assert normalize_dimensions({"unit": "in"}) is None
    assert normalize_dimensions({"display": None, "h": None}) is None


def test_render_value():
    assert render_value({"value": 26, "unit": "in"}) == "26 in"
    assert render_value({"value": 26}, "cm") == "26 cm"
    assert render_value(26) == "26"
    assert render_value(26.0, "in") == "26 in"
    assert render_value("24 in", "cm") == "24 in"
    assert render_value(True) is None
    assert render_value({"unit": "in"}) is None
