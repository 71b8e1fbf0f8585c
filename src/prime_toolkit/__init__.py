"""prime_toolkit - modular exponentiation, prime sieving and primality tests."""

__version__ = "0.1.0"

from prime_toolkit.core.modexp import mod_exp, mod_exp_linear
from prime_toolkit.core.sieve import generate, count_primes, nth_prime, primes_in_range
from prime_toolkit.core.primality import is_prime, fermat_test
from prime_toolkit.config import ToolkitConfig

__all__ = [
    "mod_exp",
    "mod_exp_linear",
    "generate",
    "count_primes",
    "nth_prime",
    "primes_in_range",
    "is_prime",
    "fermat_test",
    "ToolkitConfig",
]
