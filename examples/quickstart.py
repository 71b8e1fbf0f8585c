"""Quick start example for prime_toolkit.

Run this script to exercise each primitive and test the installation.
"""

import numpy as np


def main():
    print("Prime Toolkit - Quick Start Demo")
    print("=" * 50)

    print("\n1. Sieving primes up to 100...")
    from prime_toolkit import generate, count_primes

    primes = generate(100)
    print(f"   {count_primes(100)} primes: {primes.tolist()}")

    print("\n2. Modular exponentiation...")
    from prime_toolkit import mod_exp

    print(f"   4^13 mod 497 = {mod_exp(4, 13, 497)}")
    print(f"   uint8: 250^200 mod 251 = {mod_exp(np.uint8(250), np.uint8(200), np.uint8(251))}")

    print("\n3. Trial division vs. Fermat on Carmichael numbers...")
    from prime_toolkit import is_prime, fermat_test

    rng = np.random.default_rng(42)
    for n in (561, 1105, 1729, 7919):
        print(f"   {n:>5}: is_prime={is_prime(n)!s:<5} fermat={fermat_test(n, rounds=3, rng=rng)}")

    print("\nDone.")


if __name__ == "__main__":
    main()
