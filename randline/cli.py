"""Print a uniform random sample of the lines read from stdin.

Usage:
    randline                 # one random line
    randline 10              # ten random lines
    randline 10 --seed 7     # reproducible sample
    randline --config sample.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from omegaconf.errors import OmegaConfBaseException

from randline.config import load_config
from randline.errors import InvalidConfigError, SourceReadError
from randline.sampling.reservoir import PriorityReservoirSampler
from randline.sources import read_lines

logger = logging.getLogger(__name__)

USAGE = "randline [k]"


class _UsageError(Exception):
    """Command line could not be parsed."""


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports bad arguments with the short usage line only."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {parsed}")
    return parsed


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {parsed}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Create the ``randline`` argument parser."""
    parser = _ArgumentParser(
        prog="randline",
        usage=USAGE,
        description="Print a uniform random sample of the lines read from stdin.",
    )
    parser.add_argument(
        "k",
        nargs="?",
        type=_positive_int,
        default=None,
        help="Number of lines to sample (default 1).",
    )
    parser.add_argument("--seed", type=_non_negative_int, default=None, help="Random seed.")
    parser.add_argument("--config", type=str, default=None, help="YAML sampling config.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the command line and return its exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        args = build_parser().parse_args(argv)
    except _UsageError as exc:
        logger.debug("Bad arguments: %s", exc)
        print(f"Usage: {USAGE}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("randline").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        cfg = load_config(args.config, k=args.k, seed=args.seed)
    except (OSError, OmegaConfBaseException, InvalidConfigError) as exc:
        print(f"Unable to load config: {exc}", file=sys.stderr)
        return 1
    if cfg.k <= 0:
        print(f"Usage: {USAGE}", file=sys.stderr)
        return 1

    logger.debug("Sampling %d line(s) with seed=%s", cfg.k, cfg.seed)
    sampler = PriorityReservoirSampler(seed=cfg.seed, key_block_size=cfg.key_block_size)
    try:
        sample = sampler.sample(read_lines(stdin), cfg.k)
    except SourceReadError as exc:
        print(f"Unable to read from stdin: {exc}", file=sys.stderr)
        return 1

    for line in sample:
        stdout.write(f"{line}\n")
    stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
