__all__ = ['BigIntError', 'DivideByZero', 'UndefinedDomain', 'InvalidArgument', 'ParseError']


class BigIntError(Exception):
    pass


class DivideByZero(BigIntError, ZeroDivisionError):
    pass


class UndefinedDomain(BigIntError, ValueError):
    pass


class InvalidArgument(BigIntError, ValueError):
    pass


class ParseError(BigIntError, ValueError):
    pass
