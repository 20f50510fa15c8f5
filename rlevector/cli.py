"""
RLEVECTOR Command Line Interface

Usage:
    python -m rlevector <command> [args]

Commands:
    compress    Print the run list of a sequence
    stats       Print size and reductions of a sequence
    dot         Dot product of two comma-separated sequences

Examples:
    python -m rlevector compress 0 0 0 1 1 2 2 2 2 2
    python -m rlevector stats 1/2 1/2 3 --profile exact
    python -m rlevector dot 1,1,1,2,2 5,5,4,4,4
"""

import argparse
import logging
import sys
from fractions import Fraction
from typing import List, Optional

from rlevector.config import clear_config_cache, get_vector_config
from rlevector.core.vector import RleVector
from rlevector.validation import ConfigError, DimensionMismatchError


logger = logging.getLogger(__name__)


def parse_value(text: str):
    """Parse '3' as int, '1/3' as Fraction, anything else as float."""
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    if '/' in text:
        try:
            return Fraction(text)
        except ZeroDivisionError:
            raise ValueError(f"zero denominator in {text!r}") from None
    return float(text)


def parse_values(tokens: List[str]) -> List:
    values = []
    for token in tokens:
        values.extend(parse_value(t) for t in token.split(',') if t.strip())
    return values


def _build(values: List, profile: Optional[str]) -> RleVector:
    tolerance = get_vector_config(profile).tolerance
    return RleVector.from_dense(values, tolerance=tolerance)


def cmd_compress(args) -> int:
    v = _build(parse_values(args.values), args.profile)
    for value, count, start_pos in v.iter_runs():
        print(f"{value}\t{count}\t{start_pos}")
    print(f"dim={v.dim} runs={v.n_runs} ratio={v.compression_ratio:.3f}")
    return 0


def cmd_stats(args) -> int:
    v = _build(parse_values(args.values), args.profile)
    print(f"dim:   {v.dim}")
    print(f"runs:  {v.n_runs}")
    if v.dim:
        print(f"sum:   {v.sum()}")
        print(f"min:   {v.min()}")
        print(f"max:   {v.max()}")
        print(f"norm:  {v.norm():.6g}")
    return 0


def cmd_dot(args) -> int:
    a = _build(parse_values([args.a]), args.profile)
    b = _build(parse_values([args.b]), args.profile)
    print(a.dot(b))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rlevector',
        description='Run-length-encoded vector tools',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('--profile', default=None, help='Config profile (e.g. exact, loose)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('compress', help='Print the run list of a sequence')
    p.add_argument('values', nargs='+', help='Values (space or comma separated)')
    p.set_defaults(func=cmd_compress)

    p = sub.add_parser('stats', help='Print size and reductions of a sequence')
    p.add_argument('values', nargs='+', help='Values (space or comma separated)')
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser('dot', help='Dot product of two sequences')
    p.add_argument('a', help='First vector, comma separated')
    p.add_argument('b', help='Second vector, comma separated')
    p.set_defaults(func=cmd_dot)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
    clear_config_cache()

    try:
        return args.func(args)
    except (DimensionMismatchError, ConfigError, ValueError) as e:
        logger.error("%s", e)
        return 2


if __name__ == '__main__':
    sys.exit(main())
