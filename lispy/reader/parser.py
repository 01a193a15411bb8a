"""
  Lisp Reader: tokenizer and parser

- Emits Python primitives instead of Cons cells:

    - nil -> None
    - true / false -> bool
    - lists -> Python list
    - symbols -> Symbol
    - strings -> str (one leading and one trailing '"' stripped, no escapes)
    - numbers -> int/float

- The whole input is expected to be wrapped in exactly one pair of
  parentheses. The tokenizer strips that pair, so "(+ 1 2)" reads as
  [+, 1, 2] and a bare atom such as "x" reads as [x]. The evaluator collapses
  single-element lists, which is what makes both of these work.
"""

from __future__ import annotations

import re

from lispy import SExpression
from lispy.errors import LispySyntaxError
from lispy.types.symbol import Symbol


INTEGER_RE = re.compile(r"-?\d+")
FLOAT_RE = re.compile(r"\d+\.\d+")

ATOM_LITERALS: dict[str, SExpression] = {
    "nil": None,
    "false": False,
    "true": True,
}


def tokenize(source: str) -> list[str]:
    """Split source text into '(' / ')' / atom tokens.

    A single leading '(' and a single trailing ')' of the whole text are
    dropped before splitting.
    """
    text = source.replace("\n", " ").replace("(", "( ").replace(")", " )").strip()
    if text.startswith("("):
        text = text[1:]
    if text.endswith(")"):
        text = text[:-1]
    return [tok for tok in text.split() if tok]


def typeify(token: str) -> SExpression:
    """Classify a single atom token."""
    if INTEGER_RE.fullmatch(token):
        try:
            return int(token)
        except ValueError:
            # Beyond the interpreter's int string conversion limit
            raise LispySyntaxError(f"Integer literal too large: {token[:20]}... ({len(token)} digits)") from None
    if FLOAT_RE.fullmatch(token):
        return float(token)
    if '"' in token:
        if token.startswith('"'):
            token = token[1:]
        if token.endswith('"'):
            token = token[:-1]
        return token
    if token in ATOM_LITERALS:
        return ATOM_LITERALS[token]
    return Symbol(token)


def parse(source: str) -> list[SExpression]:
    """Parse source text into a nested list of values.

    Raises LispySyntaxError on unbalanced parentheses.
    """
    acc: list[SExpression] = []
    # stack[depth] is the list currently being filled at that nesting depth
    stack: list[list[SExpression]] = [acc]
    for tok in tokenize(source):
        if tok == "(":
            inner: list[SExpression] = []
            stack[-1].append(inner)
            stack.append(inner)
        elif tok == ")":
            if len(stack) == 1:
                raise LispySyntaxError("Unexpected ')'")
            stack.pop()
        else:
            stack[-1].append(typeify(tok))
    if len(stack) > 1:
        raise LispySyntaxError(f"Unmatched '(' ({len(stack) - 1} left open)")
    return acc
