import logging
from pathlib import Path

from yall import Expression
from yall.config import get_prelude_paths
from yall.evaluation.evaluator import evaluate
from yall.reader.parser import read
from yall.types.empty import Empty
from yall.types.environment import Environment
from yall.types.printer import to_string

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates yall source text against one long-lived global environment,
    so definitions persist from one call to the next.
    """
    def __init__(self, prelude: str | None = None):
        self.env = Environment()

        for path in get_prelude_paths():
            self.load(path)
        if prelude:
            self.eval_prelude(prelude)

    def load(self, path: Path) -> Expression:
        """Evaluate the contents of a source file."""
        logger.debug("loading prelude file %s", path)
        return self.eval(Path(path).read_text(encoding="utf-8"))

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of yall code as prelude."""
        self.eval(code)

    def eval(self, code: str) -> Expression:
        """Read every form in `code`, evaluate them in order and return the last value.

        Blank input evaluates to (). Definitions made by earlier forms stay in
        effect even if a later form fails.
        """
        result: Expression = Empty
        for expr in read(code):
            logger.debug("evaluating %s", expr)
            result = evaluate(expr, self.env)
        return result

    def eval_to_string(self, code: str) -> str:
        """Printed form of `eval(code)`."""
        return to_string(self.eval(code))
