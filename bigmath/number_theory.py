import logging
from typing import Union, Tuple

from bigmath.bigint import BigInt
from bigmath.config import default_certainty
from bigmath.error import DivideByZero, UndefinedDomain, InvalidArgument
from bigmath.rand import n_random, big_random

__all__ = ['abs', 'big_pow10', 'pow', 'sqrt', 'gcd', 'lcm', 'xgcd', 'mulinv', 'is_probable_prime', 'random_prime']

log = logging.getLogger(__name__)

Number = Union[BigInt, int, str]


def abs(num: BigInt) -> BigInt:
    num = BigInt.coerce(num)
    return -num if num < 0 else num


def big_pow10(exp: int) -> BigInt:
    """Returns 10^exp, exp should be a non-negative integer"""
    if exp < 0:
        raise InvalidArgument('Exponent of big_pow10 cannot be negative')
    return BigInt('1' + '0' * int(exp))


def pow(base: Number, exp: Union[int, BigInt], modulus: Number = None) -> BigInt:
    """Returns base^exp by repeated squaring

    A negative exponent follows integer division, 1 / base^|exp|, so the result is 0
    unless |base| is 1. When a modulus is given every intermediate product is
    reduced by it and the result is base^exp % modulus.
    """
    base = BigInt.coerce(base)
    exp = BigInt.coerce(exp)
    if modulus is not None:
        modulus = BigInt.coerce(modulus)
        if modulus == 0:
            raise DivideByZero('Cannot divide by zero')

    def reduce(num):
        return num if modulus is None else num % modulus

    if exp < 0:
        if base == 0:
            raise DivideByZero('Cannot divide by zero')
        return reduce(base if abs(base) == 1 else BigInt(0))
    if exp == 0:
        if base == 0:
            raise UndefinedDomain('Zero cannot be raised to zero')
        return reduce(BigInt(1))

    result, result_odd = reduce(base), BigInt(1)
    while exp > 1:
        if exp % 2 == 1:
            result_odd = reduce(result_odd * result)
        result = reduce(result * result)
        exp /= 2

    return reduce(result * result_odd)


def sqrt(num: BigInt) -> BigInt:
    """Floor of the square root of a non-negative BigInt, by Newton's method"""
    num = BigInt.coerce(num)
    if num < 0:
        raise InvalidArgument('Cannot compute square root of a negative integer')

    # small inputs
    if num == 0:
        return BigInt(0)
    elif num < 4:
        return BigInt(1)
    elif num < 9:
        return BigInt(2)
    elif num < 16:
        return BigInt(3)

    # A square root has about half as many digits as its square, start just below that
    sqrt_prev = BigInt(-1)
    sqrt_current = big_pow10(len(num.to_string()) // 2 - 1)

    steps = 0
    while abs(sqrt_current - sqrt_prev) > 1:
        sqrt_prev = sqrt_current
        sqrt_current = (num / sqrt_prev + sqrt_prev) / 2
        steps += 1

    # the iteration can settle one above the root when it oscillates around it
    while sqrt_current * sqrt_current > num:
        sqrt_current -= 1

    log.debug('sqrt of a %d digit number converged after %d steps', len(num.to_string()), steps)
    return sqrt_current


def gcd(num1: Number, num2: Number) -> BigInt:
    """Greatest common divisor of two integers by Euclid's algorithm, always non-negative"""
    a, b = abs(num1), abs(num2)

    if b == 0:
        return a  # gcd(a, 0) = |a|
    if a == 0:
        return b  # gcd(0, b) = |b|

    while b != 0:
        a, b = b, a % b
    return a


def lcm(num1: Number, num2: Number) -> BigInt:
    num1, num2 = BigInt.coerce(num1), BigInt.coerce(num2)
    if num1 == 0 or num2 == 0:
        return BigInt(0)
    return abs(num1 * num2) / gcd(num1, num2)


def xgcd(b: Number, n: Number) -> Tuple[BigInt, BigInt, BigInt]:
    """Takes non-negative integers b, n and returns a triple (g, x, y) such that bx + ny = g = gcd(b, n)"""
    b, n = BigInt.coerce(b), BigInt.coerce(n)
    x0, x1, y0, y1 = BigInt(1), BigInt(0), BigInt(0), BigInt(1)
    while n != 0:
        q, b, n = b / n, n, b % n
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return b, x0, y0


def mulinv(b: Number, n: Number) -> BigInt:
    """Modular inverse of b in [0, n)"""
    n = BigInt.coerce(n)
    g, x, _ = xgcd(BigInt.coerce(b) % n, n)
    if g != 1:
        raise InvalidArgument('Numbers must be coprimes')
    return (x % n + n) % n


def is_probable_prime(num: Number, certainty: int = None) -> bool:
    """Miller-Rabin primality test

    Returns whether num is prime with a false positive probability of at most
    4^-certainty. 1, 2 and 3 are all reported as prime.
    """
    n = BigInt.coerce(num)
    if certainty is None:
        certainty = default_certainty()
    if certainty < 0:
        raise InvalidArgument('Certainty cannot be negative')

    if n == 1 or n == 2 or n == 3:
        return True

    # even numbers and anything below 1 are composite
    if n < 1 or n % 2 == 0:
        return False

    # 0 and 1 are useless witnesses (0 would fail every prime), draw from 2..n-2
    max_rand = n - 2
    n_minus_one = n - 1

    # d * 2^r = n - 1 with d odd
    d, r = n_minus_one, 0
    while d % 2 == 0:
        r += 1
        d /= 2

    for _ in range(certainty):
        a = n_random(max_rand - 2) + 2
        x = pow(a, d, n)
        if x == 1 or x == n_minus_one:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n_minus_one:
                break
        else:
            log.debug('%s is a witness for the compositeness of %s', a, n)
            return False
    return True


def random_prime(num_digits: int, certainty: int = None) -> BigInt:
    """Random probable prime with exactly num_digits decimal digits"""
    if num_digits < 1:
        raise InvalidArgument('A prime has at least one digit')
    attempts = 0
    while True:
        attempts += 1
        candidate = big_random(num_digits)
        if candidate > 1 and is_probable_prime(candidate, certainty):
            log.debug('found a %d digit prime after %d attempts', num_digits, attempts)
            return candidate
