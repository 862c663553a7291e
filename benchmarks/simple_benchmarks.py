from timeit import timeit

from yall.interpreter import Interpreter
from yall.types.atoms import Number
from yall.types.environment import Environment

# Parse once, then time evaluation only
from yall.reader.parser import read
from yall.evaluation.evaluator import evaluate


def _parse_one(code: str):
    (expr,) = read(code)
    return expr


def time_evaluate(code: str, rounds: int, setup: str = "") -> float:
    """Time the evaluator on an already-parsed expression."""
    itp = Interpreter()
    if setup:
        itp.eval(setup)
    expr = _parse_one(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


def time_read(code: str, rounds: int) -> float:
    return timeit(lambda: read(code), number=rounds)


# Environment lookup through a long chain of frames

def bench_lookup_chain(n_envs: int = 500, n_lookups: int = 10000) -> float:
    root = Environment()
    root.bind("answer", Number(42))
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.resolve("answer")
    # Timed
    return timeit(lambda: env.resolve("answer"), number=n_lookups)


FN_APPLY_CODE = "((fn (x y) (+ x y)) 1 2)"

COUNT_SETUP = r"""
(def count
  (fn (xs)
    (if (null? xs)
        0
        (+ 1 (count (cdr xs))))))
(def xs '(a b c d e f g h i j k l m n o p q r s t u v w x y z))
"""

COUNT_CODE = "(count xs)"

READ_CODE = '(def f (fn (a b) (list a "b" (+ 1.5 b) \'(c d) [e f])))' * 20


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    print("Benchmark: read 20 top-level forms")
    print(f"  time: {time_read(READ_CODE, rounds=500):.6f}s  [rounds=500]")

    print("Benchmark: closure application")
    print(f"  time: {time_evaluate(FN_APPLY_CODE, rounds=20000):.6f}s  [rounds=20000]")

    print("Benchmark: recursive list length (26 elements)")
    print(f"  time: {time_evaluate(COUNT_CODE, rounds=2000, setup=COUNT_SETUP):.6f}s  [rounds=2000]")
