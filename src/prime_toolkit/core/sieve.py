"""Prime number generation with the sieve of Eratosthenes.

The sieve keeps one boolean flag per integer in ``[1, upto]``; the flag at
index ``v - 1`` ends up True exactly when ``v`` is prime. Flags are only ever
cleared while the sieve runs.
"""

from __future__ import annotations

import logging
import operator
from math import isqrt

import numpy as np

logger = logging.getLogger(__name__)


def prime_flags(upto: int) -> np.ndarray:
    """Build the primality flags for ``1..upto``.

    Args:
        upto: Largest value to classify (inclusive).

    Returns:
        Boolean array of length ``max(upto, 0)`` where ``flags[v - 1]`` is
        True iff ``v`` is prime.
    """
    upto = operator.index(upto)
    if upto <= 0:
        return np.zeros(0, dtype=bool)

    flags = np.ones(upto, dtype=bool)
    # One is not a prime number.
    flags[0] = False

    for p in range(2, isqrt(upto) + 1):
        if flags[p - 1]:
            # Smaller multiples were already cleared by smaller primes.
            flags[p * p - 1::p] = False

    return flags


def generate(upto: int) -> np.ndarray:
    """Generate all primes less than or equal to ``upto``.

    Args:
        upto: Upper bound (inclusive). Values below 2 give an empty array.

    Returns:
        Strictly increasing int64 array of primes.
    """
    flags = prime_flags(upto)
    logger.debug("sieved %d values", len(flags))
    return (np.nonzero(flags)[0] + 1).astype(np.int64)


def count_primes(upto: int) -> int:
    """Count primes <= upto."""
    return int(np.count_nonzero(prime_flags(upto)))


def nth_prime(n: int) -> int:
    """Return the nth prime number (1-indexed).

    Args:
        n: Which prime to return (1 = first prime = 2).

    Returns:
        The nth prime number.

    Raises:
        ValueError: If n is less than 1.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    # p_n < n (ln n + ln ln n) for n >= 6; the margin covers small n.
    upper_bound = max(15, int(n * (np.log(n) + np.log(np.log(n + 1)) + 2)))
    primes = generate(upper_bound)

    while len(primes) < n:
        upper_bound *= 2
        primes = generate(upper_bound)

    return int(primes[n - 1])


def primes_in_range(start: int, stop: int) -> np.ndarray:
    """Generate primes in the closed range [start, stop].

    Raises:
        ValueError: If start is greater than stop.
    """
    if start > stop:
        raise ValueError(f"start ({start}) must be <= stop ({stop})")

    primes = generate(stop)
    return primes[primes >= start]


def is_prime_array(numbers) -> np.ndarray:
    """Check primality for an array of numbers.

    Sieves once up to ``max(numbers)`` and looks every entry up in the flags.

    Args:
        numbers: Array-like of integers.

    Returns:
        Boolean array where True indicates prime.

    Raises:
        TypeError: If the array does not hold integers.
    """
    numbers = np.asarray(numbers)
    if numbers.size == 0:
        return np.zeros(numbers.shape, dtype=bool)
    if not np.issubdtype(numbers.dtype, np.integer):
        raise TypeError(f"numbers must be integers, got dtype {numbers.dtype}")
    numbers = numbers.astype(np.int64)

    flags = prime_flags(int(numbers.max()))
    result = np.zeros(numbers.shape, dtype=bool)

    positive = numbers >= 1
    result[positive] = flags[numbers[positive] - 1]
    return result
