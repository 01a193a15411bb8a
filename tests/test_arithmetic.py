import pytest
from hypothesis import given, strategies as st

from lispy.builtin import env_builtin
from lispy.errors import LispyArityError, LispyTypeError
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import parse
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 4)", 5),
        ("(* 1 4)", 4),
        ("(+ 1 4 2)", 7),
        ("(- 5 4)", 1),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -4),
        ("(/ 7.0 2)", 3.5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ('(+ "ab" "cd")', "abcd"),
    ]
)
def test_arithmetic(env, source, expected):
    assert evaluate(parse(source), env) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 5 5)", True),
        ("(= 5 5 5)", True),
        ("(= 5 5 4)", False),
        ("(= 5 4)", False),
        ("(= false true)", False),
        ("(= nil nil)", True),
        ("(= false false)", True),
        ("(= nil false)", False),
        ("(= 0 false)", False),
        ("(= 1 1.0)", False),
        ('(= "a" "a")', True),
        ("(= (quote a) (quote a))", True),
        ("(= (quote (1 (2))) (quote (1 (2))))", True),
        ("(= (quote (1 2)) (quote (1 3)))", False),
        ("(> 4 3)", True),
        ("(> 4 4)", False),
        ("(>= 4 4)", True),
        ("(< 3 4)", True),
        ("(< 4 3)", False),
        ("(<= 3 3)", True),
        ("(<= 3.5 3)", False),
    ]
)
def test_comparisons(env, source, expected):
    assert evaluate(parse(source), env) is expected


@pytest.mark.parametrize("name", ["+", "-", "*", "/"])
def test_folds_require_an_argument(env, name):
    fn = env.lookup(Symbol(name))
    with pytest.raises(LispyArityError):
        fn(env, [])


@pytest.mark.parametrize("name", ["+", "-", "*", "/"])
def test_fold_of_one_argument_is_identity(env, name):
    fn = env.lookup(Symbol(name))
    assert fn(env, [9]) == 9


def test_comparisons_are_binary(env):
    with pytest.raises(LispyArityError):
        evaluate(parse("(< 1 2 3)"), env)


def test_equals_with_no_arguments():
    assert env_builtin.equals(None, []) is True


def test_division_by_zero(env):
    with pytest.raises(ZeroDivisionError):
        evaluate(parse("(/ 1 0)"), env)


def test_type_mismatch_is_native_type_error(env):
    with pytest.raises(TypeError):
        evaluate(parse('(< "a" 1)'), env)
    with pytest.raises(TypeError):
        evaluate(parse('(+ 1 "a")'), env)


@pytest.mark.parametrize(
    "source",
    ["(+ true 1)", "(* false 3)", "(- 5 true)", "(/ 4 true)", "(< true 2)", "(>= 1 false)", "(+ true)"]
)
def test_booleans_are_not_numbers(env, source):
    with pytest.raises(LispyTypeError) as exc:
        evaluate(parse(source), env)
    assert isinstance(exc.value, TypeError)


_ops = {Symbol("+"): lambda a, b: a + b, Symbol("-"): lambda a, b: a - b, Symbol("*"): lambda a, b: a * b}
_arith = st.recursive(
    st.integers(min_value=-50, max_value=50),
    lambda children: st.tuples(st.sampled_from(sorted(_ops, key=str)), st.lists(children, min_size=2, max_size=3)).map(
        lambda t: [t[0], *t[1]]
    ),
    max_leaves=12,
)


def _reference(expr):
    if isinstance(expr, int):
        return expr
    op, *args = expr
    values = [_reference(a) for a in args]
    result = values[0]
    for v in values[1:]:
        result = _ops[op](result, v)
    return result


def _fresh_env():
    e = Environment()
    env_builtin.register(e)
    return e


@given(_arith)
def test_evaluation_is_pure_and_repeatable(expr):
    env = _fresh_env()
    snapshot = repr(expr)
    first = evaluate(expr, env)
    second = evaluate(expr, env)
    assert first == second == _reference(expr)
    assert repr(expr) == snapshot
