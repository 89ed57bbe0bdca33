"""error types raised by comparators, optionals and streams"""


class JStreamError(Exception):
    """base class for every error raised by jstream itself"""


class NullPointerException(JStreamError, ValueError):
    """a value or callback was required but none was given"""


class NoSuchElementException(JStreamError, LookupError):
    """the requested element does not exist"""


class TypeMismatchError(JStreamError, TypeError):
    """two values of incompatible types were compared"""


class IncomparableError(JStreamError, TypeError):
    """a value has no natural ordering"""


class IllegalStateException(JStreamError, RuntimeError):
    """an operation was invoked at a time it is not allowed, e.g. on a consumed stream"""
