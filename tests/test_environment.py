import pytest

from schemelet.errors import SchemeUnboundSymbol
from schemelet.reader.scanner import Token, TokenType
from schemelet.types.environment import Environment


def sym(name):
    return Token(TokenType.Symbol, 0, name, None, 0)


def test_define_and_get():
    env = Environment()
    env.define("x", 1)
    assert env.get("x") == 1
    env.define("x", 2)
    assert env.get("x") == 2


def test_get_walks_outward():
    outer = Environment()
    outer.define("x", 1)
    inner = Environment(enclosing=outer)
    assert inner.get("x") == 1
    assert "x" in inner
    assert inner.find("x") is outer


def test_define_shadows_without_touching_outer():
    outer = Environment()
    outer.define("x", 1)
    inner = Environment(enclosing=outer)
    inner.define("x", 2)
    assert inner.get("x") == 2
    assert outer.get("x") == 1


def test_set_mutates_nearest_defining_frame():
    outer = Environment()
    outer.define("x", 1)
    middle = Environment(enclosing=outer)
    inner = Environment(enclosing=middle)
    inner.set("x", 5)
    assert outer.get("x") == 5
    assert "x" not in inner.values
    assert "x" not in middle.values


@pytest.mark.parametrize("operation", ["get", "set"])
def test_unknown_identifier(operation):
    env = Environment(enclosing=Environment())
    with pytest.raises(SchemeUnboundSymbol) as excinfo:
        if operation == "get":
            env.get("missing")
        else:
            env.set("missing", 1)
    assert str(excinfo.value) == "Error: Unknown identifier: missing"


def test_construction_binds_parameters_positionally():
    env = Environment((sym("a"), sym("b")), [1, 2])
    assert env.get("a") == 1
    assert env.get("b") == 2


def test_construction_is_lenient_about_argument_count():
    short = Environment((sym("a"), sym("b")), [1])
    assert short.get("b") is None
    long = Environment((sym("a"),), [1, 2, 3])
    assert dict(long.values) == {"a": 1}


def test_construction_with_single_variadic_name():
    env = Environment(sym("args"), [1, 2, 3])
    assert env.get("args") == [1, 2, 3]


def test_deep_chain_lookup_does_not_recurse():
    env = Environment()
    env.define("root", 0)
    for _ in range(50_000):
        env = Environment(enclosing=env)
    assert env.get("root") == 0


def test_str_and_repr():
    outer = Environment()
    outer.define("x", 1)
    inner = Environment(enclosing=outer)
    inner.define("y", 2)
    assert str(inner) == "{y: 2} -> ..."
    assert repr(inner) == "<Environment chain: {y: 2} -> {x: 1}>"
