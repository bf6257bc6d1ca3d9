import pytest
from hypothesis import given, strategies as st

from doodle.equality import equals, hash_of
from doodle.types import (
    Boolean, Expr, Keyword, KeywordKey, Lambda, List, Map, Nil, NilType, Number,
    NumberKey, String, StringKey, Symbol, SymbolKey, Vector,
)

# -----------------------------------------------------
# Strategies
# -----------------------------------------------------

name_strat = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-+*?!", min_size=1, max_size=8)

number_strat = st.one_of(
    st.integers(min_value=-1000, max_value=1000),
    st.floats(min_value=-1e6, max_value=1e6, allow_infinity=False, allow_nan=False),
)

scalar_strat = st.one_of(
    name_strat.map(Symbol),
    name_strat.map(Keyword),
    number_strat.map(Number),
    st.booleans().map(Boolean),
    st.text(max_size=10).map(String),
    st.just(Nil),
)

key_strat = st.one_of(
    name_strat.map(SymbolKey),
    name_strat.map(KeywordKey),
    number_strat.map(NumberKey),
    st.text(max_size=10).map(StringKey),
)

expr_strat = st.recursive(
    scalar_strat,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(List),
        st.lists(children, max_size=4).map(Vector),
        st.lists(st.tuples(key_strat, children), max_size=3).map(Map),
    ),
    max_leaves=12,
)


def _rebuild(expr: Expr) -> Expr:
    """A structurally identical copy that shares no objects with `expr`."""
    match expr:
        case Symbol(name):
            return Symbol(name)
        case Keyword(name):
            return Keyword(name)
        case Number(value):
            return Number(value)
        case Boolean(value):
            return Boolean(value)
        case String(value):
            return String(value)
        case List(items):
            return List([_rebuild(e) for e in items])
        case Vector(items):
            return Vector([_rebuild(e) for e in items])
        case Map(pairs):
            return Map([(k, _rebuild(v)) for k, v in pairs])
        case NilType():
            return Nil
    raise AssertionError(f"unexpected {expr!r}")

# -----------------------------------------------------
# Properties
# -----------------------------------------------------

@given(expr_strat)
def test_structural_copies_are_equal(expr):
    copy = _rebuild(expr)
    assert expr == copy
    assert equals(expr, copy)


@given(expr_strat)
def test_equal_values_hash_alike(expr):
    copy = _rebuild(expr)
    assert hash(expr) == hash(copy)
    assert hash_of(expr) == hash_of(copy)


@given(expr_strat, expr_strat)
def test_hash_consistent_with_equality(a, b):
    if a == b:
        assert hash(a) == hash(b)

# -----------------------------------------------------
# Closures
# -----------------------------------------------------

def test_lambda_is_not_equal_to_itself():
    f = Lambda(("x",), Symbol("x"))
    assert not (f == f)
    assert f != f
    assert not equals(f, f)


def test_lambdas_with_same_shape_are_unequal():
    f = Lambda(("x",), Symbol("x"))
    g = Lambda(("x",), Symbol("x"))
    assert f != g


def test_collections_holding_a_closure_are_unequal():
    f = Lambda()
    assert List([f]) != List([f])
    assert Map([(SymbolKey("f"), f)]) != Map([(SymbolKey("f"), f)])


def test_lambda_is_hashable():
    f = Lambda()
    assert isinstance(hash(f), int)

# -----------------------------------------------------
# Variant distinctions
# -----------------------------------------------------

@pytest.mark.parametrize(
    "a,b",
    [
        (Symbol("a"), Keyword("a")),
        (Symbol("a"), String("a")),
        (List([Number(1)]), Vector([Number(1)])),
        (Number(1), Boolean(True)),
        (Number(0), Nil),
        (List(), Nil),
        (List([Number(1)]), List([Number(1), Number(2)])),
        (Map([(SymbolKey("a"), Number(1)), (SymbolKey("b"), Number(2))]),
         Map([(SymbolKey("b"), Number(2)), (SymbolKey("a"), Number(1))])),
    ]
)
def test_unequal_pairs(a, b):
    assert a != b
    assert b != a


def test_int_and_float_numbers_compare_by_value():
    assert Number(1) == Number(1.0)
    assert hash(Number(1)) == hash(Number(1.0))


def test_nil_equals_nil():
    assert Nil == NilType()
    assert hash(Nil) == hash(NilType())


def test_expressions_never_equal_python_values():
    assert Number(1) != 1
    assert String("a") != "a"
    assert Symbol("a") != SymbolKey("a")


def test_expressions_usable_in_sets():
    assert len({Symbol("a"), Symbol("a"), Keyword("a")}) == 2
