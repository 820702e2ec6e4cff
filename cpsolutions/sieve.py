"""Prime numbers by the sieve of Eratosthenes."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def primes_up_to(n: int) -> list[int]:
    """All primes less than or equal to ``n``."""
    if n < 2:
        return []
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    number = 2
    while number * number <= n:
        if is_prime[number]:
            is_prime[number * number :: number] = [False] * len(range(number * number, n + 1, number))
        number += 1
    return [value for value, prime in enumerate(is_prime) if prime]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the primes up to a limit (40 by default)."""
    parser = argparse.ArgumentParser(description="List primes up to a limit.")
    parser.add_argument("n", nargs="?", type=int, default=40, help="upper limit")
    args = parser.parse_args(argv)
    print(f"The prime numbers less than or equal to {args.n} are as follows: - ")
    print(" ".join(str(p) for p in primes_up_to(args.n)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())