

class SchemeError(Exception):
    """ Base class for all schemelet errors"""
    pass


class SchemeSyntaxError(SchemeError):
    """ Raised by the scanner or parser; carries the 0-based source line"""

    def __init__(self, line: int, message: str):
        super().__init__(message)
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return f"SyntaxError: [line: {self.line}] {self.message}"


class SchemeRuntimeError(SchemeError):
    """ Raised while evaluating a program"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Error: {self.message}"


class SchemeUnboundSymbol(SchemeRuntimeError):
    """ Raised when a name is read or assigned before it is defined"""


class SchemeTypeError(SchemeRuntimeError):
    """ Raised when a primitive receives arguments of the wrong type"""


class SchemeArityError(SchemeRuntimeError):
    """ Raised when a primitive receives too few arguments"""
