class LispyError(Exception):
    """ Base class for all Lispy errors"""
    pass

class LispyInvalidSymbol(LispyError):
    """ Raised when a non-symbol is used where a name is required"""
    pass

class LispyUnboundSymbol(LispyError):
    """ Raised when a symbol is looked up before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Cannot lookup unbound symbol {name}")
        self.name = name

class LispyUnrecognizedOperator(LispyError):
    """ Raised when the operator of an application is unbound, nil or false"""

    def __init__(self, operator: str):
        super().__init__(f"Unrecognized operator {operator}")
        self.operator = operator

class LispySyntaxError(LispyError):
    """ Raised for unbalanced parentheses and malformed special forms"""

class LispyArityError(LispyError):
    """ Raised when the number of arguments passed to a form or builtin is incorrect"""

class LispyTypeError(LispyError, TypeError):
    """ Raised when a value that is not callable is applied"""
