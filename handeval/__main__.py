"""Command line front end for the hand evaluator.

Examples:
    python -m handeval 8♦ 3♠ 5♦ 8♣ J♦ 3♦ 2♦
    python -m handeval --json Ah Kh Qh Jh Th 2c 3d
    python -m handeval --file hands.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple

from .errors import HandEvalError
from .evaluator import evaluate_labels
from .models import EvaluationResult, OutputConfig

LOGGER = logging.getLogger("handeval.cli")

SEPARATORS = ",[]\"'"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the best five-card poker hand among seven cards")
    parser.add_argument("cards", nargs="*", help="Seven cards such as 10♦ A♥ 2♠ (ASCII suits s/c/h/d also work)")
    parser.add_argument("--file", help="Read one hand per line from a file ('-' for stdin)")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per hand")
    parser.add_argument("--ascii", action="store_true", help="Render suits as letters instead of glyphs")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    if args.file and args.cards:
        parser.error("pass cards either as arguments or with --file, not both")
    if not args.file and not args.cards:
        parser.error("no cards given")
    return args


def split_line(line: str) -> List[str]:
    """Split a hand such as '[8♦, 3♠, 5♦]' into card tokens."""
    for char in SEPARATORS:
        line = line.replace(char, " ")
    return line.split()


def iter_hands(stream: TextIO) -> Iterator[Tuple[int, List[str]]]:
    for lineno, raw in enumerate(stream, start=1):
        line = raw.split("#", 1)[0].strip()
        if line:
            yield lineno, split_line(line)


def render(result: EvaluationResult, config: OutputConfig) -> str:
    if config.as_json:
        return json.dumps(result.to_dict(config.unicode_suits), ensure_ascii=False)
    return f"{' '.join(result.labels(config.unicode_suits))}\n{result.name}"


def run(hands: Iterable[Tuple[int, List[str]]], config: OutputConfig, out: TextIO, err: TextIO) -> int:
    """Evaluate each hand, writing results to `out`. Returns the failure count."""
    failures = 0
    for lineno, labels in hands:
        try:
            result = evaluate_labels(labels)
        except HandEvalError as exc:
            failures += 1
            LOGGER.debug("Hand %d rejected: %r", lineno, labels)
            print(f"line {lineno}: {exc}" if lineno else f"error: {exc}", file=err)
            continue
        print(render(result, config), file=out)
    return failures


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    config = OutputConfig(unicode_suits=not args.ascii, as_json=args.json)

    if not args.file:
        failures = run([(0, split_line(" ".join(args.cards)))], config, sys.stdout, sys.stderr)
    elif args.file == "-":
        failures = run(iter_hands(sys.stdin), config, sys.stdout, sys.stderr)
    else:
        with open(args.file, encoding="utf-8") as stream:
            failures = run(iter_hands(stream), config, sys.stdout, sys.stderr)

    if failures:
        LOGGER.info("%d hand(s) could not be evaluated", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
