# Core type aliases for Lispy's data model.
# Plain Python values (int, float, str, bool, None, list) represent both parsed
# code and runtime values; only symbols and closures get their own classes.
#
# Naming guidance:
# - SExpression: forms produced by the reader (code-as-data).
# - LispValue:  values produced by the evaluator.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

from loguru import logger

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

# Library code stays quiet until a front end calls configure_logging()
logger.disable("lispy")
