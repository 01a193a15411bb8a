from lispy.builtin.env_builtin import register
from lispy.interpreter import Evaluator, new_evaluator
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


def test_new_evaluator_has_builtins():
    ev = new_evaluator()
    for name in ["=", "first", "last", "drop", "cons", ">", ">=", "<", "<=", "+", "*", "/", "-"]:
        assert Symbol(name) in ev.env
    assert len(ev.env) == 13
    assert repr(ev.env) == "<Environment 13 bindings>"


def test_evaluators_do_not_share_state():
    a, b = new_evaluator(), new_evaluator()
    a.evaluate("(define x 1)")
    assert "x" in a.env
    assert "x" not in b.env


def test_evaluate_in_explicit_env(evaluator):
    other = Environment()
    register(other)
    assert evaluator.evaluate("(define q 1)", env=other) == 1
    assert "q" in other
    assert "q" not in evaluator.env


def test_parse_is_exposed(evaluator):
    assert evaluator.parse("(+ 1 2)") == [Symbol("+"), 1, 2]


def test_load_file_returns_last_value(tmp_path):
    src = tmp_path / "prog.lisp"
    src.write_text(
        "(defn square (x) (* x x))\n"
        "(define n 4)\n"
        "(square n)\n"
    )
    ev = Evaluator()
    assert ev.load_file(src) == 16
    assert ev.evaluate("(square 3)") == 9


def test_load_file_with_single_form(tmp_path):
    src = tmp_path / "one.lisp"
    src.write_text("(+ 1 2)")
    assert Evaluator().load_file(str(src)) == 3


def test_load_empty_file(tmp_path):
    src = tmp_path / "empty.lisp"
    src.write_text("\n\n")
    assert Evaluator().load_file(src) is None
