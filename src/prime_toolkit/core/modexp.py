"""Modular exponentiation over fixed-width and arbitrary-precision integers.

``mod_exp`` uses square-and-multiply, so its cost grows with the bit length
of the exponent. ``mod_exp_linear`` keeps the plain repeated-multiplication
algorithm (cost proportional to the exponent itself) and returns exactly the
same values; it is useful as a reference and for small exponents.

Both accept Python ``int`` or numpy integer scalars. NumPy scalars are
widened to ``int`` before any multiplication and the result is converted back
to the modulus type, so intermediate products never wrap around.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

import numpy as np


class ModularInteger(Protocol):
    """Arithmetic needed by modular exponentiation.

    The type must also be constructible from an ``int`` so that zero and one
    can be produced as ``type(x)(0)`` and ``type(x)(1)``.
    """

    def __add__(self, other, /): ...

    def __mul__(self, other, /): ...

    def __floordiv__(self, other, /): ...

    def __mod__(self, other, /): ...

    def __lt__(self, other, /) -> bool: ...


T = TypeVar("T", bound=ModularInteger)


def _identities(modulus: T) -> tuple[T, T]:
    kind = type(modulus)
    return kind(0), kind(1)


def _widen(value):
    if isinstance(value, np.integer):
        return int(value)
    return value


def mod_exp(base: T, exponent: T, modulus: T) -> T:
    """Compute ``base ** exponent % modulus`` by square-and-multiply.

    Args:
        base: Base of the exponentiation.
        exponent: Non-negative exponent. Negative values behave like zero.
        modulus: Modulus; ``1`` short-circuits to zero.

    Returns:
        The residue, as the same type as ``modulus``. For a positive
        modulus it always lies in ``[0, modulus)``, negative bases included
        (``mod_exp(-2, 3, 5) == 2``).
    """
    zero, one = _identities(modulus)
    if modulus == one:
        return zero

    kind = type(modulus)
    b, e, m = _widen(base), _widen(exponent), _widen(modulus)
    z, o = _widen(zero), _widen(one)
    two = o + o

    result = o
    while z < e:
        if e % two == o:
            result = (result * b) % m
        b = (b * b) % m
        e = e // two

    return kind(result) if isinstance(modulus, np.integer) else result


def mod_exp_linear(base: T, exponent: T, modulus: T) -> T:
    """Compute ``base ** exponent % modulus`` by repeated multiplication.

    Takes ``exponent`` steps. Same results as :func:`mod_exp`.
    """
    zero, one = _identities(modulus)
    if modulus == one:
        return zero

    kind = type(modulus)
    b, e, m = _widen(base), _widen(exponent), _widen(modulus)
    z, o = _widen(zero), _widen(one)

    result = o
    i = z
    while i < e:
        result = (result * b) % m
        i = i + o

    return kind(result) if isinstance(modulus, np.integer) else result
