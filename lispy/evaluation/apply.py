"""Application engine for Lispy.

Centralizes function application for the evaluator:
- Lambda closures are applied in a fresh call frame copied from their
  captured environment (see Lambda.extend_env), then their body is evaluated.
- Builtins are Python callables invoked as fn(env, args).
"""

from typing import Callable

from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyTypeError
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments."""
    return evaluate_fn(fn.body, fn.extend_env(args))


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable.

    - For Lambda, defer to apply_lambda.
    - For Python callables (builtins), invoke with the caller env and list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise LispyTypeError(f"Cannot apply non-function {head!r}")
