"""Runtime environment for Lispy.

The Environment is a flat mapping from symbol names to evaluated Lisp values.
There is no `outer` link: closures capture a snapshot via `copy()`, and a call
frame is a copy of that snapshot with the parameters bound on top. Bindings
made in a copy are never visible to the environment it was copied from, and
bindings made in the original after the copy are never visible to the copy.
"""

from __future__ import annotations

from typing import Mapping

from lispy import LispValue
from lispy.errors import LispyInvalidSymbol, LispyUnboundSymbol
from lispy.types.symbol import Symbol


class Environment:
    """Flat mapping from Symbol names to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[str, LispValue] | None = None):
        self.vars: dict[str, LispValue] = dict(bindings) if bindings else {}

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this environment.

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name.id] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises LispyUnboundSymbol if not found.
        """
        try:
            return self.vars[name.id]
        except KeyError:
            raise LispyUnboundSymbol(name.id) from None

    def copy(self) -> Environment:
        """Snapshot of the current bindings."""
        return Environment(self.vars)

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Symbol):
            return name.id in self.vars
        return name in self.vars

    def __getitem__(self, name: str) -> LispValue:
        return self.vars[name]

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
