import pytest

from cell import Numeric, Text, parse_user_input, stringify


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3.14", Numeric(3.14)),
        ("18", Numeric(18)),
        ("-2", Numeric(-2)),
        ("+7.5", Numeric(7.5)),
        (".5", Numeric(0.5)),
        ("1.", Numeric(1.0)),
        ("1e3", Numeric(1000)),
        ("2.5E-2", Numeric(0.025)),
        ("abc", Text("abc")),
        ("", Text("")),
        (" 1", Text(" 1")),
        ("1 ", Text("1 ")),
        ("1,000", Text("1,000")),
        ("1_000", Text("1_000")),
        ("inf", Text("inf")),
        ("nan", Text("nan")),
        ("1e999", Text("1e999")),
        ("0x10", Text("0x10")),
        ("e5", Text("e5")),
        (".", Text(".")),
        ("-", Text("-")),
        ("١٢", Text("١٢")),
        ("１", Text("１")),
    ],
)
def test_parse_user_input(text, expected):
    assert parse_user_input(text) == expected


@pytest.mark.parametrize(
    "cell, expected",
    [
        (Numeric(18), "18"),
        (Numeric(-0.0), "0"),
        (Numeric(3.14), "3.14"),
        (Numeric(0.1), "0.1"),
        (Numeric(1e21), "1e+21"),
        (Numeric(1e-7), "1e-07"),
        (Numeric(float("inf")), "Infinity"),
        (Numeric(float("-inf")), "-Infinity"),
        (Numeric(float("nan")), "NaN"),
        (Text(""), ""),
        (Text('a "quoted", value'), 'a "quoted", value'),
    ],
)
def test_stringify(cell, expected):
    assert stringify(cell) == expected


def test_numeric_coerces_int_to_float():
    cell = Numeric(18)
    assert isinstance(cell.value, float)
    assert cell == Numeric(18.0)


@pytest.mark.parametrize(
    "value",
    [0.0, 1.0, -1.5, 0.1, 1 / 3, 123456789.125, 1e20, 1e21, 5e-324, 1.7976931348623157e308, -2.5e-12],
)
def test_numeric_text_round_trip(value):
    text = stringify(Numeric(value))
    parsed = parse_user_input(text)
    assert isinstance(parsed, Numeric)
    assert stringify(parsed) == text


def test_non_finite_renderings_stay_text():
    for value in (float("inf"), float("-inf"), float("nan")):
        assert isinstance(parse_user_input(stringify(Numeric(value))), Text)
