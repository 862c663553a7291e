import pytest
from hypothesis import given, strategies as st

from yall.evaluation.evaluator import evaluate, evaluate_body
from yall.reader.parser import read
from yall.types import Empty, Function, Number, Quoted, String, Symbol, TRUE, FALSE, make_list
from yall.types.environment import Environment
from yall.types.errors import YallApplicationError, YallTypeError, YallUnboundSymbol

from conftest import run, run_print


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    for literal in (Number(1), Number(3.14), String("hello"), TRUE, FALSE, Empty):
        assert evaluate(literal, env) is literal




@given(st.one_of(
    st.integers().map(Number),
    st.floats().map(Number),
    st.text(max_size=5).map(String),
    st.sampled_from([TRUE, FALSE, Empty]),
))
def test_literals_are_idempotent(literal):
    env = Environment()
    env.bind("x", Number(1))
    assert evaluate(literal, env) is literal
    assert evaluate(literal, Environment(outer=env)) is literal


def test_callables_evaluate_to_themselves(env):
    car = env.resolve("car")
    assert evaluate(car, env) is car


def test_symbol_lookup(env):
    env.bind("x", Number(42))
    assert evaluate(Symbol("x"), env) == Number(42)
    with pytest.raises(YallUnboundSymbol) as excinfo:
        evaluate(Symbol("z"), env)
    assert excinfo.value.name == "z"


def test_quote_returns_the_expression_unevaluated(env):
    assert run_print("'(a b c)", env) == "(a b c)"
    assert run("'x", env) == Symbol("x")
    assert run("''x", env) == Quoted(Symbol("x"))


def test_simple_expression(env):
    assert run_print("(+ 1 2)", env) == "3"


def test_operator_position_is_evaluated(env):
    assert run_print("((if #t + *) 2 3)", env) == "5"
    assert run_print("((if #f + *) 2 3)", env) == "6"


@pytest.mark.parametrize("source", ["(1 2 3)", '("f" 1)', "(#t)", "(() 1)", "('car '(1))"])
def test_applying_a_non_callable(env, source):
    with pytest.raises(YallApplicationError):
        run(source, env)


def test_unbound_operator(env):
    with pytest.raises(YallUnboundSymbol):
        run("(frobnicate 1)", env)


def test_arguments_are_evaluated_left_to_right(env):
    run("(list (def a 1) (def a 2))", env)
    assert run_print("a", env) == "2"


def test_evaluate_rejects_foreign_values(env):
    with pytest.raises(YallTypeError):
        evaluate(42, env)


def test_evaluate_body(env):
    assert evaluate_body(Empty, env) is Empty
    body = make_list(read("(def a 2) (* a a)"))
    assert evaluate_body(body, env) == Number(4)


def test_procedures_receive_evaluated_arguments(env):
    seen = []

    def spy(args):
        seen.append(args)
        return Empty

    env.bind("spy", Function.procedure("spy", spy))
    run("(spy (+ 1 1) 'q)", env)
    assert seen == [make_list([Number(2), Symbol("q")])]


def test_forms_receive_raw_arguments_and_the_environment(env):
    seen = []

    def spy(call_env, args):
        seen.append((call_env, args))
        return Empty

    env.bind("spy", Function.form("spy", spy))
    run("(spy (+ 1 1) undefined)", env)
    assert seen == [(env, make_list(read("(+ 1 1) undefined")))]


def test_procedure_arguments_evaluate_left_to_right(env):
    assert run_print("(list (def a 1) a)", env) == "(a 1)"


def test_eval_arguments_evaluate_left_to_right(env):
    assert run_print("(eval (def b 2) b)", env) == "2"
