"""Random BigInt generation"""

import random
import secrets

from bigmath.bigint import BigInt
from bigmath.config import RANDOM_SOURCE, current_random_source
from bigmath.error import InvalidArgument

__all__ = ['n_random', 'big_random', 'seed']

_pseudo = random.Random()


def seed(a=None):
    """Seed the pseudo random source, for reproducible runs with BIGMATH_RANDOM=pseudo"""
    _pseudo.seed(a)


def _randbelow(n: int) -> int:
    if current_random_source() is RANDOM_SOURCE.PSEUDO:
        return _pseudo.randrange(n)
    return secrets.randbelow(n)


def n_random(upper_bound) -> BigInt:
    """Uniformly distributed BigInt in [0, upper_bound]"""
    upper = BigInt.coerce(upper_bound).value
    if upper < 0:
        raise InvalidArgument('Upper bound of a random draw cannot be negative')
    return BigInt(_randbelow(upper + 1))


def big_random(num_digits: int = 0) -> BigInt:
    """Random BigInt with exactly `num_digits` decimal digits

    When num_digits is 0 a length between 1 and 1000 digits is picked at random
    """
    if num_digits < 0:
        raise InvalidArgument('Number of digits cannot be negative')
    if num_digits == 0:
        num_digits = 1 + _randbelow(1000)
    if num_digits == 1:
        return BigInt(_randbelow(10))
    lo = 10 ** (num_digits - 1)
    return BigInt(lo + _randbelow(9 * lo))
