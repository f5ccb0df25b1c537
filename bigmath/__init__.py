"""
Arbitrary precision integer arithmetic and number theory: powers, integer square roots, gcd/lcm and Miller-Rabin primality.
"""

import logging

from .error import *
from .bigint import *
from .rand import *
from .number_theory import *
from . import error, bigint, rand, number_theory

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = []

for _module in (error, bigint, rand, number_theory):
    __all__.extend(getattr(_module, '__all__', []))

__version__ = "0.1"
