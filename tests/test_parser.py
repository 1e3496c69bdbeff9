import pytest
from hypothesis import given, strategies as st

from slisp.errors import SlispNotSupported, SlispOverflowError, SlispParseError
from slisp.reader.parser import parse_expression, parse_value
from slisp.types.expr import Atom, Call
from slisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1", 1),
        ("99", 99),
        ("39019272", 39019272),
        ("0", 0),
        ("007", 7),
        ("9223372036854775807", 2 ** 63 - 1),
        ("89328.32378", 89328.32378),
        ("0.0", 0.0),
        ("00.50", 0.5),
    ]
)
def test_parse_value_number(source, expected):
    result = parse_value(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source, expected",
    [
        ('"ilahids89090"', "ilahids89090"),
        (r'"some string \"quoted string\""', r'some string \"quoted string\"'),
        ('""', ""),
        ('"("', "("),
        ('"a "b" c"', 'a "b" c'),
    ]
)
def test_parse_value_string_is_verbatim(source, expected):
    assert parse_value(source) == expected


@pytest.mark.parametrize(
    "source",
    ["", "-5", "+5", "1.", ".5", "1e5", "1.5.2", "abc", '"', '"abc', "12a", " 1"]
)
def test_parse_value_malformed(source):
    with pytest.raises(SlispParseError) as info:
        parse_value(source)
    assert info.value.fragment == source
    assert "malformed value" in str(info.value)


def test_parse_value_overflow():
    with pytest.raises(SlispOverflowError) as info:
        parse_value("9223372036854775808")
    assert isinstance(info.value, SlispParseError)
    assert info.value.fragment == "9223372036854775808"


def test_parse_value_list_literal_not_supported():
    with pytest.raises(SlispNotSupported) as info:
        parse_value("'(1 2 3)")
    assert isinstance(info.value, SlispParseError)


@pytest.mark.parametrize(
    "source",
    ["AuhLahdsd_93089", "_90380293____dlauhdkS", "x", "_"]
)
def test_parse_expr_symbol(source):
    assert parse_expression(source, "pattern") == Symbol(source)


@pytest.mark.parametrize(
    "source, expected",
    [
        (
            "(dlhadk_90898 980890 0.0 jlhdksd)",
            Call("dlhadk_90898", [Atom(980890), Atom(0.0), Symbol("jlhdksd")]),
        ),
        (
            "(___idojldi980_ jkd (defhkh dsakdj))",
            Call("___idojldi980_", [Symbol("jkd"), Call("defhkh", [Symbol("dsakdj")])]),
        ),
        ("(f 1 2 3)", Call("f", [Atom(1), Atom(2), Atom(3)])),
        ("(f a (g b))", Call("f", [Symbol("a"), Call("g", [Symbol("b")])])),
        ("(f (g a) b)", Call("f", [Call("g", [Symbol("a")]), Symbol("b")])),
        (
            "(f a (g (h b)) c)",
            Call("f", [Symbol("a"), Call("g", [Call("h", [Symbol("b")])]), Symbol("c")]),
        ),
        ("(f)", Call("f", [])),
        ("(  f   1)", Call("f", [Atom(1)])),
        ("(f  1  2)", Call("f", [Atom(1), Atom(2)])),
        ('(f "hi" 2.5)', Call("f", [Atom("hi"), Atom(2.5)])),
    ]
)
def test_parse_expr_call(source, expected, grammar):
    assert parse_expression(source, grammar) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(f (g a) (h b))",    # two sibling nested calls
        "(f (g a)",           # missing ')'
        "(f a",
        '(f "a(b" c)',        # '(' inside a string
        "",
        "1abc",
        "(1 2)",
    ]
)
def test_parse_expr_errors_are_structured(source):
    with pytest.raises(SlispParseError):
        parse_expression(source, "pattern")


def test_parse_expr_sibling_nested_calls_report_unmatched():
    with pytest.raises(SlispParseError) as info:
        parse_expression("(f (g a) (h b))", "pattern")
    assert "unmatched parentheses" in str(info.value)


def test_parse_expr_atom_fallback(grammar):
    assert parse_expression("42", grammar) == Atom(42)
    assert parse_expression("4.5", grammar) == Atom(4.5)
    assert parse_expression('"s"', grammar) == Atom("s")


def test_parse_expr_list_literal_not_supported(grammar):
    with pytest.raises(SlispNotSupported):
        parse_expression("'(1 2)", grammar)


def test_parse_expression_unknown_grammar():
    with pytest.raises(ValueError):
        parse_expression("x", "lalr")


def test_parse_expression_uses_configured_grammar(monkeypatch):
    monkeypatch.setenv("SLISP_GRAMMAR", "tokens")
    expected = Call("f", [Call("g", [Symbol("a")]), Call("h", [Symbol("b")])])
    assert parse_expression("(f (g a) (h b))") == expected

    monkeypatch.setenv("SLISP_GRAMMAR", "pattern")
    with pytest.raises(SlispParseError):
        parse_expression("(f (g a) (h b))")


# -------------------------------
# Strategies
# -------------------------------
digits_strat = st.text(alphabet="0123456789", min_size=1, max_size=12)

symbol_strat = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,15}", fullmatch=True)

# '.' in the string pattern does not cross line breaks
string_body_strat = st.text(
    st.characters(exclude_characters="\n"), min_size=0, max_size=30
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.integers(min_value=0, max_value=2 ** 63 - 1))
def test_integer_literals(n):
    assert parse_value(str(n)) == n


@given(digits_strat)
def test_integer_literals_with_leading_zeros(d):
    assert parse_value(d) == int(d, 10)


@given(digits_strat, digits_strat)
def test_float_literals(whole, frac):
    text = f"{whole}.{frac}"
    result = parse_value(text)
    assert isinstance(result, float)
    assert result == float(text)


@given(string_body_strat)
def test_string_literals_verbatim(s):
    assert parse_value('"' + s + '"') == s


@given(symbol_strat)
def test_symbols(name):
    assert parse_expression(name, "pattern") == Symbol(name)
    assert parse_expression(name, "tokens") == Symbol(name)


@given(symbol_strat, st.lists(st.one_of(symbol_strat, digits_strat), max_size=5))
def test_parsing_is_idempotent(name, args):
    source = f"({name} {' '.join(args)})"
    assert parse_expression(source, "pattern") == parse_expression(source, "pattern")
    assert parse_expression(source, "pattern") == parse_expression(source, "tokens")


def test_deeply_nested_input_is_a_parse_error(grammar):
    source = "(add " * 5000 + "1" + ")" * 5000
    with pytest.raises(SlispParseError) as info:
        parse_expression(source, grammar)
    assert "nested too deeply" in str(info.value)


def test_whitespace_only_arguments_are_skipped(grammar):
    assert parse_expression("(f 1 \t 2)", grammar) == Call("f", [Atom(1), Atom(2)])
