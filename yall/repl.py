"""Line-at-a-time read-eval-print loop."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from yall.config import get_prompt
from yall.interpreter import Interpreter
from yall.types.errors import YallError

logger = logging.getLogger(__name__)

ERROR_PREFIX = "*** ERROR: "


def repl(
    interp: Interpreter,
    lines: Iterable[str] | None = None,
    out: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Evaluate each input line and echo its printed form.

    A failing line reports its error and the loop carries on with the next
    one; bindings made before the failure are kept.
    """
    lines = sys.stdin if lines is None else lines
    out = sys.stdout if out is None else out
    prompt = get_prompt() if prompt is None else prompt

    out.write(prompt)
    out.flush()
    for line in lines:
        if line.strip():
            try:
                out.write(interp.eval_to_string(line) + "\n")
            except (YallError, RecursionError) as ex:
                logger.warning("failed to evaluate %r: %s", line.strip(), ex)
                out.write(ERROR_PREFIX + str(ex) + "\n")
        out.write(prompt)
        out.flush()
    out.write("\n")
