import pytest

from yall.builtin import BUILTINS
from yall.types import Function, Number, Symbol, TRUE, FALSE
from yall.types.environment import Environment
from yall.types.errors import YallTypeError, YallUnboundSymbol


def test_resolve_walks_the_chain():
    root = Environment()
    root.bind("a", Number(1))
    child = Environment(outer=root)
    grandchild = Environment(outer=child)
    assert grandchild.resolve("a") == Number(1)
    assert grandchild.resolve(Symbol("a")) == Number(1)


def test_bind_only_touches_the_local_frame():
    root = Environment()
    root.bind("a", Number(1))
    child = Environment(outer=root)
    child.bind("a", Number(2))
    assert child.resolve("a") == Number(2)
    assert root.resolve("a") == Number(1)
    assert child.find("a") is child
    assert root.find("a") is root


def test_unbound_symbol_carries_the_name():
    with pytest.raises(YallUnboundSymbol) as excinfo:
        Environment(outer=Environment()).resolve("missing")
    assert excinfo.value.name == "missing"
    assert "missing" in str(excinfo.value)


def test_builtins_are_visible_from_every_frame():
    env = Environment(outer=Environment())
    assert isinstance(env.resolve("car"), Function)
    assert env.resolve("#t") is TRUE
    assert env.resolve("#f") is FALSE
    assert "if" in env
    assert "nope" not in env


def test_builtin_table_is_shared_and_read_only():
    a, b = Environment(), Environment()
    assert a.builtins is b.builtins is BUILTINS
    with pytest.raises(TypeError):
        BUILTINS["car"] = Number(1)


def test_user_bindings_shadow_builtins_without_touching_the_table():
    env = Environment()
    env.bind("car", Number(1))
    assert env.resolve("car") == Number(1)
    assert isinstance(Environment().resolve("car"), Function)


def test_custom_builtin_table():
    env = Environment(builtins={"answer": Number(42)})
    assert env.resolve("answer") == Number(42)
    with pytest.raises(YallUnboundSymbol):
        env.resolve("car")


def test_bind_rejects_non_symbols():
    with pytest.raises(YallTypeError):
        Environment().bind(Number(1), Number(1))


def test_str_and_repr():
    root = Environment()
    root.bind("a", Number(1))
    child = Environment(outer=root)
    child.bind("b", Number(2))
    assert str(root) == "{a: 1}"
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> {a: 1}>"
