"""Single-number primality tests.

``is_prime`` is deterministic trial division. ``fermat_test`` is the
probabilistic Fermat test: it never rejects a prime, but composites
(Carmichael numbers in particular) can slip through as "probably prime".
"""

from __future__ import annotations

import logging
import math
import operator

import numpy as np

from prime_toolkit.core.modexp import mod_exp

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 20

_INT64_SPAN = 2**63


def isqrt(n: int) -> int:
    """Exact integer square root, 0 for negative input."""
    n = operator.index(n)
    if n < 0:
        return 0
    return math.isqrt(n)


def _draw_witness(rng: np.random.Generator, n: int) -> int:
    """Uniform witness in ``[2, n - 2]``, for n of any size."""
    # Offsets 0..span map onto witnesses 2..n - 2.
    span = n - 4
    if span < _INT64_SPAN:
        return 2 + int(rng.integers(0, span, endpoint=True))

    # Rejection sampling on random bits; each draw is accepted with
    # probability above 1/2.
    bits = span.bit_length()
    nbytes = (bits + 7) // 8
    while True:
        value = int.from_bytes(rng.bytes(nbytes), "little") >> (8 * nbytes - bits)
        if value <= span:
            return 2 + value


def is_prime(n: int) -> bool:
    """Check if a number is prime by trial division.

    Every integer from 2 up to the exact square root of ``n`` is tried.

    Args:
        n: Number to check.

    Returns:
        True if n is prime, False otherwise.
    """
    n = operator.index(n)
    if n <= 1:
        return False

    for divisor in range(2, isqrt(n) + 1):
        if n % divisor == 0:
            return False

    return True


def fermat_test(
    n: int,
    rounds: int = DEFAULT_ROUNDS,
    rng: np.random.Generator | int | None = None,
) -> bool:
    """Fermat probable-prime test.

    Each round draws a witness ``a`` in ``[2, n - 2]`` and checks
    ``a ** (n - 1) % n == 1``. The first failing witness proves ``n``
    composite.

    Args:
        n: Number to test. Any size; witnesses beyond 64 bits are built
            from random bytes of the generator.
        rounds: Number of witnesses to try.
        rng: Random generator, or a seed for one. ``None`` uses a fresh
            unseeded generator.

    Returns:
        False if n is definitely composite (or below 2), True if n is
        probably prime.

    Raises:
        ValueError: If rounds is less than 1.
    """
    if rounds < 1:
        raise ValueError(f"rounds must be >= 1, got {rounds}")

    n = operator.index(n)
    if n < 2:
        return False
    if n in (2, 3):
        return True

    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)

    for _ in range(rounds):
        witness = _draw_witness(rng, n)
        if mod_exp(witness, n - 1, n) != 1:
            logger.debug("%d is composite, witness %d", n, witness)
            return False

    return True
