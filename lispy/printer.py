"""Render Lispy values as Lisp source text.

The printed form doubles as the notion of "same value" for the `=` builtin:
two values are equal when they print the same.
"""

from __future__ import annotations

from io import StringIO

from lispy import LispValue
from lispy.types.symbol import Symbol
from lispy.types.lambda_fn import Lambda


def to_lisp_str(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write(obj, buffer)
        return buffer.getvalue()


def _write(obj: LispValue, buffer: StringIO) -> None:
    if obj is None:
        buffer.write("nil")
    elif obj is True:
        buffer.write("true")
    elif obj is False:
        buffer.write("false")
    elif isinstance(obj, Symbol):
        buffer.write(obj.id)
    elif isinstance(obj, str):
        buffer.write(f'"{obj}"')
    elif isinstance(obj, list):
        buffer.write("(")
        for i, item in enumerate(obj):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(obj, Lambda):
        buffer.write("(lambda (")
        buffer.write(" ".join(f.id for f in obj.formals))
        buffer.write(") ")
        _write(obj.body, buffer)
        buffer.write(")")
    elif callable(obj):
        buffer.write(f"<builtin {getattr(obj, '__name__', type(obj).__name__)}>")
    else:
        buffer.write(repr(obj))
