"""Interactive read-eval-print loop.

One line of input is one evaluation. Errors are reported as a tagged
diagnostic line and the session carries on with the same environment.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from loguru import logger

from lispy import config
from lispy.errors import LispyError
from lispy.interpreter import Evaluator
from lispy.printer import to_lisp_str

# Failures that abort a single evaluation but never the session
EVAL_ERRORS = (LispyError, TypeError, ArithmeticError, RecursionError)


def format_error(ex: BaseException) -> str:
    return f"${type(ex).__name__}: {ex}"


class Repl:
    def __init__(self, evaluator: Evaluator | None = None, out: TextIO | None = None):
        self.evaluator = evaluator or Evaluator()
        self.out = out or sys.stdout

    def eval_line(self, line: str) -> str:
        """Evaluate one line and return the text to display."""
        try:
            return f"-> {to_lisp_str(self.evaluator.evaluate(line))}"
        except EVAL_ERRORS as ex:
            logger.debug("eval failed: {!r}", ex)
            return format_error(ex)

    def run(self, prompt: str | None = None, history_file: Path | None = None) -> None:
        """Read lines until EOF, printing each result."""
        import readline

        prompt = config.get_prompt() if prompt is None else prompt
        if history_file is None:
            history_file = config.get_history_file()
        if history_file is not None and history_file.exists():
            readline.read_history_file(history_file)

        logger.info("repl.start history={}", history_file)
        try:
            while True:
                try:
                    line = input(prompt)
                except EOFError:
                    print(file=self.out)
                    break
                except KeyboardInterrupt:
                    print(file=self.out)
                    continue
                if not line.strip():
                    continue
                print(self.eval_line(line), file=self.out)
        finally:
            if history_file is not None:
                readline.write_history_file(history_file)
            logger.info("repl.stop")
