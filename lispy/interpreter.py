from __future__ import annotations

from pathlib import Path

from loguru import logger

from lispy import SExpression, LispValue
from lispy.reader.parser import parse
from lispy.types.environment import Environment
from lispy.evaluation.evaluator import evaluate
from lispy.builtin.env_builtin import register


class Evaluator:
    """
    Parses and evaluates Lispy source against a long-lived Environment.
    Definitions made by one call are visible to the next.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def parse(self, code: str) -> list[SExpression]:
        return parse(code)

    def evaluate(self, code: str, env: Environment | None = None) -> LispValue:
        """Parse `code` and evaluate it in `env` (default: this evaluator's env)."""
        return evaluate(parse(code), self.env if env is None else env)

    def load_file(self, path: str | Path) -> LispValue:
        """Evaluate every top-level form of a file in order; return the last value."""
        code = Path(path).read_text(encoding="utf-8")
        logger.debug("load {} ({} bytes)", path, len(code))
        if not code.strip():
            return None
        return self.evaluate(f"(doall\n{code}\n)")


def new_evaluator() -> Evaluator:
    """Create an Evaluator with a freshly seeded builtin environment."""
    return Evaluator()
