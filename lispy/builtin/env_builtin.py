"""Built-in functions for the Lispy runtime environment.

Every builtin takes the caller's environment and the list of evaluated
arguments. Type mismatches between operands (e.g. comparing a string to an
integer) are left to Python and surface as a native TypeError. Booleans passed
to arithmetic or ordering raise LispyTypeError.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from lispy import LispValue
from lispy.errors import LispyArityError, LispyTypeError
from lispy.printer import to_lisp_str
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


def _expect_arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise LispyArityError(f"{name} requires exactly {n} argument{'s' if n != 1 else ''}, got {len(expr)}")


def _reject_booleans(name: str, expr: list[LispValue]) -> None:
    # bool subclasses int in Python; true and false are not numbers here
    for x in expr:
        if isinstance(x, bool):
            raise LispyTypeError(f"{name} cannot be applied to boolean {to_lisp_str(x)}")


# -------------------------------
# Equality
# -------------------------------
def equals(env: Environment, expr: list[LispValue]) -> bool:
    """True if every argument prints the same as the first (or zero/one arg)."""
    if len(expr) <= 1:
        return True
    first = to_lisp_str(expr[0])
    return all(to_lisp_str(other) == first for other in expr[1:])


# -------------------------------
# Lists
# -------------------------------
def first(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the first element of a list; nil for the empty list."""
    _expect_arity("first", expr, 1)
    xs = expr[0]
    return xs[0] if xs else None


def last(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the last element of a list; nil for the empty list."""
    _expect_arity("last", expr, 1)
    xs = expr[0]
    return xs[-1] if xs else None


def drop(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return a new list without the first element."""
    _expect_arity("drop", expr, 1)
    return list(expr[0][1:])


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a new list by prepending head to tail (non-destructive).

    A nil tail yields a single-element list.
    """
    _expect_arity("cons", expr, 2)
    head, tail = expr
    if tail is None:
        return [head]
    return [head] + tail


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        _expect_arity(name, expr, 2)
        _reject_booleans(name, expr)
        return op(expr[0], expr[1])

    compare.__name__ = name
    compare.__doc__ = f"Binary comparison ({name} a b)."
    return compare


gt = _comparison(">", operator.gt)
gte = _comparison(">=", operator.ge)
lt = _comparison("<", operator.lt)
lte = _comparison("<=", operator.le)


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(a: LispValue, b: LispValue) -> LispValue:
    # Integer operands keep integer (floor) division
    if isinstance(a, int) and isinstance(b, int):
        return a // b
    return a / b


def _fold(name: str, op: Callable[[LispValue, LispValue], LispValue]):
    def fold(env: Environment, expr: list[LispValue]) -> LispValue:
        if not expr:
            raise LispyArityError(f"{name} requires at least 1 argument")
        _reject_booleans(name, expr)
        return reduce(op, expr)

    fold.__name__ = name
    fold.__doc__ = f"Left fold of ({name} a b ...) starting from the first argument."
    return fold


add = _fold("+", operator.add)
mul = _fold("*", operator.mul)
div = _fold("/", _divide)
sub = _fold("-", operator.sub)


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            Symbol("="): equals,
            Symbol("first"): first,
            Symbol("last"): last,
            Symbol("drop"): drop,
            Symbol("cons"): cons,
            Symbol(">"): gt,
            Symbol(">="): gte,
            Symbol("<"): lt,
            Symbol("<="): lte,
            Symbol("+"): add,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("-"): sub,
        }
    )
