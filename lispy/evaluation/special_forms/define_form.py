from loguru import logger

from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Evaluates `value`, binds it to `name` in `env`, and returns it.
    """
    if len(tail) != 2:
        raise LispyArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("define {}", name)
    return value
