"""Core evaluator for the Lispy interpreter.

A plain recursive tree walker: special forms are dispatched through the
SPECIAL_FORMS table, everything else is function application. There is no
tail-call elimination, so recursion depth is bounded by Python's stack.
"""

from __future__ import annotations

from lispy import SExpression, LispValue
from lispy.errors import LispyUnboundSymbol, LispyUnrecognizedOperator
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.evaluation.apply import apply
from lispy.evaluation.special_forms import SPECIAL_FORMS
from lispy.evaluation.special_forms.if_form import is_truthy
from lispy.printer import to_lisp_str


def unwrap(expr: SExpression) -> SExpression:
    """Collapse a single-element list to its element; () stays ()."""
    if isinstance(expr, list) and len(expr) == 1:
        return expr[0]
    return expr


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` against `env`."""
    expr = unwrap(expr)

    match expr:
        case Symbol():
            return env.lookup(expr)
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)
        case [head, *tail]:
            op = _evaluate_operator(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(op, args, env, evaluate)

    # --- Atoms (and the empty list) return as-is ---
    return expr


def _evaluate_operator(head: SExpression, env: Environment) -> LispValue:
    try:
        op = evaluate(head, env)
    except LispyUnboundSymbol:
        if not isinstance(head, Symbol):
            raise
        raise LispyUnrecognizedOperator(str(head)) from None
    if not is_truthy(op):
        raise LispyUnrecognizedOperator(to_lisp_str(head))
    return op
