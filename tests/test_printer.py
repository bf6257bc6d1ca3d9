import pytest
from hypothesis import given, strategies as st

from doodle.printer import prn_str
from doodle.types import (
    Boolean, Keyword, KeywordKey, Lambda, List, ListKey, Map, Nil, Number,
    NumberKey, String, StringKey, Symbol, SymbolKey, Vector,
)


@pytest.mark.parametrize(
    "expr,expected",
    [
        (Symbol("foo"), "foo"),
        (Keyword("foo"), ":foo"),
        (Number(42), "42"),
        (Number(-7), "-7"),
        (Number(3.5), "3.5"),
        (Boolean(True), "true"),
        (Boolean(False), "false"),
        (String("hello world"), '"hello world"'),
        (String('say "hi"'), '"say "hi""'),  # no escaping beyond wrapping
        (Nil, "nil"),
        (List(), "()"),
        (Vector(), "[]"),
        (Map(), "{}"),
        (List([Symbol("+"), Number(1), Number(2)]), "(+ 1 2)"),
        (Vector([Number(1), String("a"), Nil]), '[1 "a" nil]'),
        (Map([(SymbolKey("a"), Number(1))]), "{a 1}"),
        (Map([(KeywordKey("a"), Number(1)), (StringKey("b"), Boolean(False))]), '{:a 1 "b" false}'),
        (Map([(NumberKey(1), List([Symbol("x")]))]), "{1 (x)}"),
        (Map([(ListKey([Number(1), Number(2)]), Nil)]), "{(1 2) nil}"),
        (Lambda(("x",), Symbol("x")), "#<lambda>"),
    ]
)
def test_prn_str(expr, expected):
    assert prn_str(expr) == expected
    assert str(expr) == expected


def test_nested_form(nested_form):
    assert prn_str(nested_form) == '(let [x 1] {k "v"} :done)'


def test_map_prints_in_pair_order_with_duplicates():
    m = Map([
        (SymbolKey("b"), Number(2)),
        (SymbolKey("a"), Number(1)),
        (SymbolKey("b"), Number(3)),
    ])
    assert prn_str(m) == "{b 2 a 1 b 3}"


name_strat = st.text(alphabet="abcxyz-+", min_size=1, max_size=5)

printable_strat = st.recursive(
    st.one_of(
        name_strat.map(Symbol),
        st.integers(min_value=-100, max_value=100).map(Number),
        st.text(max_size=5).map(String),
        st.just(Nil),
    ),
    lambda children: st.one_of(
        st.lists(children, max_size=3).map(List),
        st.lists(children, max_size=3).map(Vector),
        st.lists(st.tuples(name_strat.map(SymbolKey), children), max_size=3).map(Map),
    ),
    max_leaves=10,
)


@given(printable_strat)
def test_printing_is_deterministic(expr):
    assert prn_str(expr) == prn_str(expr)


@given(printable_strat)
def test_wrapping_in_a_list_adds_parens(expr):
    assert prn_str(List([expr])) == f"({prn_str(expr)})"
    assert prn_str(Vector([expr])) == f"[{prn_str(expr)}]"


@given(st.lists(st.integers(min_value=0, max_value=9), max_size=6))
def test_list_of_numbers_is_space_joined(numbers):
    expr = List([Number(n) for n in numbers])
    assert prn_str(expr) == "(" + " ".join(str(n) for n in numbers) + ")"
