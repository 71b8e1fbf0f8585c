"""Command-line interface for prime_toolkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from prime_toolkit.config import ToolkitConfig
from prime_toolkit.utils.logging import setup_logger

logger = logging.getLogger("prime_toolkit.cli")


def cmd_primes(args: argparse.Namespace, config: ToolkitConfig) -> int:
    """Print all primes up to a bound."""
    from prime_toolkit.core.sieve import generate

    primes = generate(args.upto)
    logger.info(f"{len(primes)} primes <= {args.upto}")
    print(" ".join(str(p) for p in primes))
    return 0


def cmd_is_prime(args: argparse.Namespace, config: ToolkitConfig) -> int:
    """Deterministic primality check."""
    from prime_toolkit.core.primality import is_prime

    print(is_prime(args.n))
    return 0


def cmd_fermat(args: argparse.Namespace, config: ToolkitConfig) -> int:
    """Fermat probable-prime check."""
    from prime_toolkit.core.primality import fermat_test

    rounds = args.rounds if args.rounds is not None else config.fermat_rounds
    seed = args.seed if args.seed is not None else config.seed

    logger.info(f"Fermat test: n={args.n}, rounds={rounds}, seed={seed}")
    print(fermat_test(args.n, rounds=rounds, rng=seed))
    return 0


def cmd_modexp(args: argparse.Namespace, config: ToolkitConfig) -> int:
    """Modular exponentiation."""
    from prime_toolkit.core.modexp import mod_exp

    print(mod_exp(args.base, args.exponent, args.modulus))
    return 0


def cmd_count(args: argparse.Namespace, config: ToolkitConfig) -> int:
    """Count primes up to a bound."""
    from prime_toolkit.core.sieve import count_primes

    print(count_primes(args.upto))
    return 0


def cmd_nth(args: argparse.Namespace, config: ToolkitConfig) -> int:
    """Print the nth prime."""
    from prime_toolkit.core.sieve import nth_prime

    print(nth_prime(args.n))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prime-toolkit",
        description="Modular exponentiation, prime sieving and primality tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write debug log to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    primes_parser = subparsers.add_parser("primes", help="List primes up to a bound")
    primes_parser.add_argument("upto", type=int, help="Upper bound (inclusive)")

    is_prime_parser = subparsers.add_parser("is-prime", help="Trial-division primality check")
    is_prime_parser.add_argument("n", type=int, help="Number to check")

    fermat_parser = subparsers.add_parser("fermat", help="Fermat probable-prime check")
    fermat_parser.add_argument("n", type=int, help="Number to check")
    fermat_parser.add_argument("--rounds", type=int, default=None, help="Number of witnesses")
    fermat_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    modexp_parser = subparsers.add_parser("modexp", help="Compute base^exponent mod modulus")
    modexp_parser.add_argument("base", type=int)
    modexp_parser.add_argument("exponent", type=int)
    modexp_parser.add_argument("modulus", type=int)

    count_parser = subparsers.add_parser("count", help="Count primes up to a bound")
    count_parser.add_argument("upto", type=int, help="Upper bound (inclusive)")

    nth_parser = subparsers.add_parser("nth", help="Print the nth prime (1-indexed)")
    nth_parser.add_argument("n", type=int, help="Index of the prime")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = ToolkitConfig.load(args.config) if args.config else ToolkitConfig()
    except (OSError, ValueError) as e:
        print(f"Error: could not load config: {e}", file=sys.stderr)
        return 2

    level = logging.INFO if args.verbose else config.level
    setup_logger(min(level, config.level), log_path=args.log_file)

    commands = {
        "primes": cmd_primes,
        "is-prime": cmd_is_prime,
        "fermat": cmd_fermat,
        "modexp": cmd_modexp,
        "count": cmd_count,
        "nth": cmd_nth,
    }

    try:
        return commands[args.command](args, config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
