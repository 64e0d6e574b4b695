"""Command-line front end for the number, sequence and search routines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algozoo.dynamic import lcs_length
from algozoo.numbers import factorial, fibonacci, gcd, is_prime, lcm
from algozoo.numeric import dft_magnitudes
from algozoo.search import binary_search, linear_search

SORTED_ITEMS = (1, 2, 3, 4, 5, 6, 7, 8, 9)
UNSORTED_ITEMS = (9, 1, 8, 2, 7, 3, 6, 4, 5)


def _index_text(index: int | None) -> str:
    return "-1" if index is None else str(index)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algozoo", description="Run one of the classic algorithms."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    prime = commands.add_parser("prime", help="tell whether N is prime")
    prime.add_argument("n", type=int)

    fact = commands.add_parser("factorial", help="print N!")
    fact.add_argument("n", type=int)

    fib = commands.add_parser("fibonacci", help="print the N-th Fibonacci number")
    fib.add_argument("n", type=int)

    for name, text in (("gcd", "greatest common divisor"), ("lcm", "least common multiple")):
        sub = commands.add_parser(name, help=f"print the {text} of A and B")
        sub.add_argument("a", type=int)
        sub.add_argument("b", type=int)

    dft = commands.add_parser("dft", help="print the DFT magnitudes of the samples")
    dft.add_argument("samples", type=float, nargs="+")

    lcs = commands.add_parser("lcs", help="print the longest common subsequence length")
    lcs.add_argument("s")
    lcs.add_argument("t")

    binary = commands.add_parser(
        "binary-search", help="print the index of TARGET in a sorted list, or -1"
    )
    binary.add_argument("target", type=int)
    binary.add_argument("--items", type=int, nargs="+", default=list(SORTED_ITEMS))

    linear = commands.add_parser(
        "linear-search", help="print the first index of TARGET in a list, or -1"
    )
    linear.add_argument("target", type=int)
    linear.add_argument("--items", type=int, nargs="+", default=list(UNSORTED_ITEMS))

    return parser


def _run(args: argparse.Namespace) -> list[str]:
    command = args.command
    if command == "prime":
        return ["prime" if is_prime(args.n) else "composite"]
    if command == "factorial":
        return [str(factorial(args.n))]
    if command == "fibonacci":
        return [str(fibonacci(args.n))]
    if command == "gcd":
        return [str(gcd(args.a, args.b))]
    if command == "lcm":
        return [str(lcm(args.a, args.b))]
    if command == "dft":
        return [f"{value:g}" for value in dft_magnitudes(args.samples)]
    if command == "lcs":
        return [str(lcs_length(args.s, args.t))]
    if command == "binary-search":
        return [_index_text(binary_search(args.items, args.target))]
    return [_index_text(linear_search(args.items, args.target))]


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run the chosen algorithm and print its result."""
    args = _build_parser().parse_args(argv)
    try:
        lines = _run(args)
    except (ValueError, ZeroDivisionError) as error:
        print(f"algozoo: error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())