import re
from typing import Union

from bigmath.error import DivideByZero, ParseError

__all__ = ['BigInt']

DECIMAL = re.compile(r'[+-]?[0-9]+')

# Below the interpreter's int <-> str digit limit (4300 since 3.11)
CHUNK_DIGITS = 1000
CHUNK_BITS = 3000


def _digits_to_int(digits: str) -> int:
    if len(digits) <= CHUNK_DIGITS:
        return int(digits, 10)
    k = len(digits) // 2
    return _digits_to_int(digits[:-k]) * 10 ** k + _digits_to_int(digits[-k:])


def _int_to_digits(n: int) -> str:
    """Decimal digits of a non-negative int, split on a power of ten in the middle"""
    if n.bit_length() <= CHUNK_BITS:
        return str(n)
    k = n.bit_length() * 30103 // 200000  # half the digits, log10(2) ~ 0.30103
    hi, lo = divmod(n, 10 ** k)
    return _int_to_digits(hi) + _int_to_digits(lo).zfill(k)


def _parse(s: str) -> int:
    if not DECIMAL.fullmatch(s):
        raise ParseError(f"Expected an integer, got '{s}'")
    value = _digits_to_int(s.lstrip('+-'))
    return -value if s[0] == '-' else value


def _truncdiv(a: int, b: int) -> int:
    if b == 0:
        raise DivideByZero('Cannot divide by zero')
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class BigInt:
    """Immutable arbitrary-precision signed integer

    Division and modulo truncate toward zero, so the remainder takes the
    sign of the dividend: a == (a / b) * b + a % b
    """

    __slots__ = ('_value',)

    def __init__(self, value: Union['BigInt', int, str] = 0):
        if isinstance(value, BigInt):
            value = value.value
        elif isinstance(value, str):
            value = _parse(value)
        elif not isinstance(value, int):
            raise TypeError(f"Cannot construct a BigInt from {type(value).__name__}")
        object.__setattr__(self, '_value', int(value))

    @classmethod
    def coerce(cls, other) -> 'BigInt':
        return other if isinstance(other, cls) else cls(other)

    @property
    def value(self) -> int:
        """The underlying python integer"""
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError('BigInt is immutable')

    def to_string(self) -> str:
        if self._value < 0:
            return '-' + _int_to_digits(-self._value)
        return _int_to_digits(self._value)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"BigInt('{self.to_string()}')"

    def __hash__(self):
        return hash(self._value)

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __bool__(self):
        return self._value != 0

    def __neg__(self):
        return BigInt(-self._value)

    def __pos__(self):
        return self

    def __abs__(self):
        return BigInt(abs(self._value))

    def __add__(self, other):
        return BigInt(self._value + self.coerce(other).value)

    def __radd__(self, other):
        return self.coerce(other) + self

    def __sub__(self, other):
        return BigInt(self._value - self.coerce(other).value)

    def __rsub__(self, other):
        return self.coerce(other) - self

    def __mul__(self, other):
        return BigInt(self._value * self.coerce(other).value)

    def __rmul__(self, other):
        return self.coerce(other) * self

    def __truediv__(self, other):
        return BigInt(_truncdiv(self._value, self.coerce(other).value))

    def __rtruediv__(self, other):
        return self.coerce(other) / self

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other):
        divisor = self.coerce(other).value
        return BigInt(self._value - _truncdiv(self._value, divisor) * divisor)

    def __rmod__(self, other):
        return self.coerce(other) % self

    def __pow__(self, exp, modulus=None):
        from bigmath.number_theory import pow
        return pow(self, exp, modulus)

    def __rpow__(self, base):
        from bigmath.number_theory import pow
        return pow(self.coerce(base), self)

    def _compare(self, other):
        if not isinstance(other, (BigInt, int, str)):
            return NotImplemented
        return self._value - self.coerce(other).value

    # str operands are only coerced for ordering, equal values must hash equal
    def __eq__(self, other):
        if isinstance(other, str):
            return NotImplemented
        diff = self._compare(other)
        return diff if diff is NotImplemented else diff == 0

    def __ne__(self, other):
        if isinstance(other, str):
            return NotImplemented
        diff = self._compare(other)
        return diff if diff is NotImplemented else diff != 0

    def __lt__(self, other):
        diff = self._compare(other)
        return diff if diff is NotImplemented else diff < 0

    def __le__(self, other):
        diff = self._compare(other)
        return diff if diff is NotImplemented else diff <= 0

    def __gt__(self, other):
        diff = self._compare(other)
        return diff if diff is NotImplemented else diff > 0

    def __ge__(self, other):
        diff = self._compare(other)
        return diff if diff is NotImplemented else diff >= 0

    def is_probable_prime(self, certainty=None) -> bool:
        from bigmath.number_theory import is_probable_prime
        return is_probable_prime(self, certainty)
