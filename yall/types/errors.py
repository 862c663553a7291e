class YallError(Exception):
    """ Base class for all yall errors"""
    pass

class YallParseError(YallError):
    """ Raised when source text cannot be read into expressions"""

class YallUnterminatedString(YallParseError):
    """ Raised when a string literal has no closing quote"""

class YallUnterminatedList(YallParseError):
    """ Raised when input ends inside a list"""

class YallMissingQuotedExpression(YallParseError):
    """ Raised when a quote marker is not followed by an expression"""

class YallNumberOutOfRange(YallParseError):
    """ Raised when a numeric literal is too large for a double"""

class YallUnboundSymbol(YallError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Unbound symbol: {name}")
        self.name = name

class YallApplicationError(YallError):
    """ Raised when the operator of an application is not callable"""

class YallArityError(YallError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class YallTypeError(YallError):
    """ Raised when the types of arguments passed to a function are incorrect"""
