"""Closure representation and argument binding for Lispy."""

from __future__ import annotations

from lispy import SExpression, LispValue
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


class Lambda:
    """A first-class closure: formal parameters, body, and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Snapshot, so later bindings in the defining scope stay invisible
        self.env: Environment = env.copy()

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Return a fresh call frame with formals bound to `args`.

        Binding is positional and stops at the shorter of the two lists:
        formals without an argument stay unbound, surplus arguments are
        ignored.
        """
        frame = self.env.copy()
        for formal, value in zip(self.formals, args):
            frame.define(formal, value)
        return frame

    def __str__(self) -> str:
        from lispy.printer import to_lisp_str
        return to_lisp_str(self)

    def __repr__(self) -> str:
        return str(self)
