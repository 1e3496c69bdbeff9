from __future__ import annotations


class SlispError(Exception):
    """ Base class for all slisp errors"""
    pass


class SlispParseError(SlispError):
    """ Raised when a source fragment cannot be parsed"""

    def __init__(self, message: str, fragment: str | None = None):
        super().__init__(message)
        self.fragment = fragment


class SlispOverflowError(SlispParseError):
    """ Raised when an integer literal does not fit in 64 bits"""


class SlispNotSupported(SlispParseError):
    """ Raised when syntax is recognised but has no construction yet (list literals)"""


class SlispNameError(SlispError):
    """ Base class for errors about symbol names"""

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class SlispRedefinitionError(SlispNameError):
    """ Raised when a name that is already bound is bound again"""


class SlispUndefinedSymbol(SlispNameError):
    """ Raised when a symbol is used before it is bound"""


class SlispInvalidSymbol(SlispNameError):
    """ Raised when something other than a string is used as a name"""


class SlispEvalError(SlispError):
    """ Raised when an expression cannot be evaluated"""


class SlispUnknownFunction(SlispEvalError):
    """ Raised when a call names a function that is not registered"""

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class SlispApplicationNotSupported(SlispEvalError):
    """ Raised when a call is evaluated without any builtin registry"""


class SlispArityError(SlispEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class SlispTypeError(SlispEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""
