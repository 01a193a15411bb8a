import pytest

from lispy.printer import to_lisp_str
from lispy.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-12, "-12"),
        (2.5, "2.5"),
        ("hi", '"hi"'),
        (Symbol("foo"), "foo"),
        ([], "()"),
        ([1, [Symbol("a"), "b"], None], '(1 (a "b") nil)'),
    ]
)
def test_to_lisp_str(value, expected):
    assert to_lisp_str(value) == expected


def test_lambda_prints_as_source(evaluator):
    fn = evaluator.evaluate("(lambda (x y) (+ x y))")
    assert to_lisp_str(fn) == "(lambda (x y) (+ x y))"
    assert str(fn) == repr(fn) == "(lambda (x y) (+ x y))"


def test_builtin_prints_its_name(evaluator):
    assert to_lisp_str(evaluator.env["+"]) == "<builtin +>"
    assert to_lisp_str(evaluator.env["<="]) == "<builtin <=>"


def test_symbol_repr_and_equality():
    assert repr(Symbol("a")) == "Symbol('a')"
    assert Symbol("a") == Symbol("a")
    assert Symbol("a") != "a"
    assert hash(Symbol("a")) == hash(Symbol("a"))
    assert len({Symbol("a"), Symbol("a"), Symbol("b")}) == 2
