from loguru import logger

from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyArityError, LispyInvalidSymbol
from lispy.evaluation.special_forms.lambda_form import parse_formals
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import Symbol


def defn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defn name (params...) body)
    Binds a new closure to `name` in `env` and returns it. The closure's own
    snapshot also sees `name`, so the function may call itself.
    """
    if len(tail) != 3:
        raise LispyArityError("defn requires a name, a parameter list and a body")

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise LispyInvalidSymbol(f"Cannot defn {name!r}: name must be a symbol")

    fn = Lambda(parse_formals(params, "defn"), body, env)
    fn.env.define(name, fn)
    env.define(name, fn)
    logger.debug("defn {} ({})", name, " ".join(map(str, fn.formals)))
    return fn
