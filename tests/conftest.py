import pytest

from doodle.types import Keyword, List, Map, Number, String, Symbol, SymbolKey, Vector

# Configuration is read from the process environment at call time. Clear the
# Doodle variables for every test so a developer's shell settings cannot leak
# into the results; tests that need them set them through monkeypatch.


@pytest.fixture(autouse=True)
def _clean_doodle_env(monkeypatch):
    monkeypatch.delenv("DOODLE_STRICT_BINDINGS", raising=False)
    monkeypatch.delenv("DOODLE_LOG_LEVEL", raising=False)


@pytest.fixture
def plus_form():
    # (+ 1 2)
    return List([Symbol("+"), Number(1), Number(2)])


@pytest.fixture
def nested_form():
    # (let [x 1] {:k "v"})
    return List([
        Symbol("let"),
        Vector([Symbol("x"), Number(1)]),
        Map([(SymbolKey("k"), String("v"))]),
        Keyword("done"),
    ])
