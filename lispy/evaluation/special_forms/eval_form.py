from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.types.environment import Environment


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise LispyArityError("eval expects exactly one argument")
    # Evaluate the argument to obtain a form, then evaluate that form.
    form = evaluate_fn(tail[0], env)
    return evaluate_fn(form, env)
