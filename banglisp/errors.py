from __future__ import annotations


class BangError(Exception):
    """ Base class for all banglisp errors"""
    pass


class BangSyntaxError(BangError):
    """ Raised by the reader on malformed source text"""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line


class BangUnboundVariable(BangError):
    """ Raised when a symbol has neither a lexical nor a global value"""

    def __init__(self, name: str):
        super().__init__(f"unbound variable: {name}")
        self.name = name


class BangUndefinedFunction(BangError):
    """ Raised when a symbol in operator position has no function binding"""

    def __init__(self, name: str):
        super().__init__(f"symbol '{name}' does not have function")
        self.name = name


class BangWrongNumberOfArguments(BangError):
    """ Raised when the number of arguments passed to an operator is incorrect"""

    def __init__(self, expected: int, variadic: bool, got: int):
        if variadic:
            message = f"wrong number of arguments: expected at least {expected}, got {got}"
        else:
            message = f"wrong number of arguments: expected {expected}, got {got}"
        super().__init__(message)
        self.expected = expected
        self.variadic = variadic
        self.got = got


class BangUnsupportedArgumentType(BangError):
    """ Raised when an operator receives a value of the wrong kind"""

    def __init__(self, operation: str, value):
        super().__init__(f"unsupported argument type for '{operation}': {value}")
        self.operation = operation
        self.value = value


class BangTypeError(BangError):
    """ Raised for malformed expressions and uncallable operators"""


class BangConstantError(BangError):
    """ Raised on an attempt to assign to a constant symbol"""

    def __init__(self, name: str):
        super().__init__(f"cannot assign to constant: {name}")
        self.name = name


class BangDivisionByZero(BangError):
    """ Raised when a numeric operator divides by zero"""

    def __init__(self, operation: str):
        super().__init__(f"division by zero in '{operation}'")
        self.operation = operation


class BangStackExhausted(BangError):
    """ Raised when evaluation nests deeper than the host stack allows"""


class BangArithmeticOverflow(BangError):
    """ Raised when a fixnum result leaves the 64-bit signed range"""

    def __init__(self, operation: str):
        super().__init__(f"fixnum overflow in '{operation}'")
        self.operation = operation
