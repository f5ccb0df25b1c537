import os
from enum import Enum, unique

from bigmath.error import InvalidArgument

__all__ = ['RANDOM_SOURCE', 'current_random_source', 'default_certainty']

# The optimal number of Miller-Rabin rounds for cryptographic use is 40
# See http://stackoverflow.com/questions/6325576/how-many-iterations-of-rabin-miller-should-i-use-for-cryptographic-safe-primes
DEFAULT_CERTAINTY = 40


@unique
class RANDOM_SOURCE(Enum):
    SYSTEM = 'system'
    PSEUDO = 'pseudo'


def current_random_source():
    raw = os.environ.get('BIGMATH_RANDOM', 'system')
    try:
        return RANDOM_SOURCE(raw)
    except ValueError:
        raise InvalidArgument(f"BIGMATH_RANDOM must be 'system' or 'pseudo', got '{raw}'") from None


def default_certainty():
    raw = os.environ.get('BIGMATH_CERTAINTY')
    if raw is None:
        return DEFAULT_CERTAINTY
    try:
        certainty = int(raw)
    except ValueError:
        raise InvalidArgument(f"BIGMATH_CERTAINTY must be an integer, got '{raw}'") from None
    if certainty < 0:
        raise InvalidArgument('BIGMATH_CERTAINTY cannot be negative')
    return certainty
