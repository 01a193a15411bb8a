from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.types.environment import Environment


def is_truthy(value: LispValue) -> bool:
    """Only false and nil are falsy; 0, "" and () are all true."""
    return value is not False and value is not None


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise LispyArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return None  # nil if no else
