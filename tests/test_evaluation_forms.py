import pytest

from yall.evaluation.special_forms.fn_form import CLOSURE_NAME
from yall.types import Empty, Function, Number, Symbol, CallableKind
from yall.types.errors import YallArityError, YallTypeError, YallUnboundSymbol

from conftest import run, run_print


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", "1"),
        ("(if #f 1 2)", "2"),
        # only #f is false
        ("(if () 1 2)", "1"),
        ("(if 0 1 2)", "1"),
        ('(if "" 1 2)', "1"),
        ("(if (null? ()) 'yes 'no)", "yes"),
    ]
)
def test_if(env, source, expected):
    assert run_print(source, env) == expected


def test_if_does_not_evaluate_the_untaken_branch(env):
    assert run_print("(if #t 1 (undefined))", env) == "1"
    assert run_print("(if #f (undefined) 2)", env) == "2"


@pytest.mark.parametrize("source", ["(if)", "(if #t)", "(if #t 1)", "(if #t 1 2 3)"])
def test_if_arity(env, source):
    with pytest.raises(YallArityError):
        run(source, env)


# ------------------ def ------------------

def test_def_binds_and_returns_the_symbol(env):
    assert run("(def a 3)", env) == Symbol("a")
    assert run_print("(list 1 2 a)", env) == "(1 2 3)"


def test_def_evaluates_its_value(env):
    run("(def a (+ 1 2))", env)
    assert env.resolve("a") == Number(3)


def test_def_rebinds(env):
    run("(def a 1) (def a 2)", env)
    assert run_print("a", env) == "2"


def test_def_can_shadow_builtins(env):
    run("(def car 5)", env)
    assert run_print("car", env) == "5"


@pytest.mark.parametrize("source", ["(def)", "(def a)", "(def a 1 2)"])
def test_def_arity(env, source):
    with pytest.raises(YallArityError):
        run(source, env)


@pytest.mark.parametrize("source", ['(def "a" 1)', "(def 1 1)", "(def (a) 1)"])
def test_def_requires_a_symbol(env, source):
    with pytest.raises(YallTypeError):
        run(source, env)


# ------------------ fn ------------------

def test_fn_simple(env):
    assert run_print("((fn (x) (* x 2)) 3)", env) == "6"


def test_fn_returns_a_procedure(env):
    f = run("(fn (x) x)", env)
    assert isinstance(f, Function)
    assert f.kind is CallableKind.PROCEDURE
    assert f.name == CLOSURE_NAME
    assert str(f) == "#<proc #fn>"


def test_fn_body_is_a_sequence(env):
    assert run_print("((fn (x) (def y (+ x 1)) (* y y)) 2)", env) == "9"


def test_fn_with_empty_body_returns_empty(env):
    assert run("((fn ()))", env) is Empty


def test_fn_without_parameters(env):
    assert run_print("((fn () 42))", env) == "42"


def test_fn_parameters_are_local(env):
    run("(def x 1) (def f (fn (x) (+ x 10)))", env)
    assert run_print("(f 5)", env) == "15"
    assert run_print("x", env) == "1"


def test_fn_definitions_stay_in_the_call_frame(env):
    run("(def f (fn () (def inner 1) inner))", env)
    assert run_print("(f)", env) == "1"
    with pytest.raises(YallUnboundSymbol):
        run("inner", env)


def test_lexical_scoping(env):
    run(
        """
        (def x 1)
        (def get-x (fn () x))
        (def call-with-x (fn (x) (get-x)))
        """,
        env,
    )
    # get-x sees the x of its defining environment, not the caller's
    assert run_print("(call-with-x 100)", env) == "1"


def test_closures_capture_their_environment(env):
    run("(def make-adder (fn (n) (fn (x) (+ x n))))", env)
    run("(def add5 (make-adder 5)) (def add7 (make-adder 7))", env)
    assert run_print("(list (add5 1) (add7 1))", env) == "(6 8)"


def test_recursion(env):
    run(
        "(def count (fn (xs) (if (null? xs) 0 (+ 1 (count (cdr xs))))))",
        env,
    )
    assert run_print("(count '(a b c d))", env) == "4"


def test_closure_arity(env):
    run("(def f (fn (a b) a))", env)
    with pytest.raises(YallArityError):
        run("(f 1)", env)
    with pytest.raises(YallArityError):
        run("(f 1 2 3)", env)


def test_fn_requires_a_parameter_list(env):
    with pytest.raises(YallArityError):
        run("(fn)", env)
    with pytest.raises(YallTypeError):
        run("(fn x x)", env)
    with pytest.raises(YallTypeError):
        run("(fn (1) 1)", env)


# ------------------ eval ------------------

def test_eval_evaluates_twice(env):
    run("(def a '(+ 1 2))", env)
    assert run_print("a", env) == "(+ 1 2)"
    assert run_print("(eval a)", env) == "3"


def test_eval_of_a_quoted_expression(env):
    assert run_print("(eval '(* 2 3))", env) == "6"
    assert run_print("(eval ''x)", env) == "x"


def test_eval_evaluates_every_argument(env):
    assert run_print("(eval 1 (def b 2))", env) == "1"
    assert run_print("b", env) == "2"


def test_eval_runs_in_the_current_environment(env):
    run("(def f (fn (y) (eval '(+ y 1))))", env)
    assert run_print("(f 41)", env) == "42"


def test_eval_arity(env):
    with pytest.raises(YallArityError):
        run("(eval)", env)
