"""Core number-theory primitives."""

from prime_toolkit.core.modexp import ModularInteger, mod_exp, mod_exp_linear
from prime_toolkit.core.sieve import (
    count_primes,
    generate,
    is_prime_array,
    nth_prime,
    prime_flags,
    primes_in_range,
)
from prime_toolkit.core.primality import DEFAULT_ROUNDS, fermat_test, is_prime, isqrt

__all__ = [
    "ModularInteger",
    "mod_exp",
    "mod_exp_linear",
    "count_primes",
    "generate",
    "is_prime_array",
    "nth_prime",
    "prime_flags",
    "primes_in_range",
    "DEFAULT_ROUNDS",
    "fermat_test",
    "is_prime",
    "isqrt",
]
