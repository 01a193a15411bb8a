from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyArityError, LispySyntaxError, LispyInvalidSymbol
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import Symbol


def parse_formals(params: SExpression, form: str) -> list[Symbol]:
    """Validate a parameter list, returning it as a list of Symbols."""
    if not isinstance(params, list):
        raise LispySyntaxError(f"{form} expects a parameter list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise LispyInvalidSymbol(f"{form} parameter {p!r} is not a symbol")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body)
    The closure captures a snapshot of `env`; the body is evaluated only on call.
    """
    if len(tail) != 2:
        raise LispyArityError("lambda requires a parameter list and a body")

    params, body = tail
    return Lambda(parse_formals(params, "lambda"), body, env)
