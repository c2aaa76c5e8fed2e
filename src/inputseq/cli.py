"""CLI for replaying a recorded keyboard script against a sequence.

Each script line is one step and lists the keys held during that step,
separated by whitespace. An empty line is a step with nothing held; lines
starting with '#' are skipped.

Example:
    printf 'up\\n\\nup\\n\\ndown\\n' | inputseq-replay --sequence up up down
"""
import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from pydantic import ValidationError

from .config import get_config
from .logging_config import setup_logger
from .matching import keyboard_sequence
from .sources import SteppedInputSource
from .tokens import Key, parse_key

logger = setup_logger("inputseq.cli")

EXIT_COMPLETED = 0
EXIT_INCOMPLETE = 1
EXIT_BAD_INPUT = 2


def parse_script(lines: Iterable[str]) -> List[List[Key]]:
    """Parse script lines into per-step held key lists.

    Raises:
        ValueError: if a line names an unknown key
    """
    steps: List[List[Key]] = []
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("#"):
            continue
        steps.append([parse_key(name) for name in stripped.split()])
    return steps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inputseq-replay",
        description="Replay held-key steps against a keyboard input sequence.",
    )
    parser.add_argument(
        "--sequence", "-s", nargs="+", required=True, metavar="KEY",
        help="Expected keys in order (enum names or values, e.g. up, a, 1)",
    )
    parser.add_argument(
        "--script", "-f", type=Path, default=None,
        help="Step script file (defaults to stdin)",
    )
    parser.add_argument(
        "--no-auto-reset", action="store_true",
        help="Ignore wrong inputs instead of resetting (accessibility mode)",
    )
    parser.add_argument(
        "--trace", action="store_true", default=None,
        help="Log per-step diagnostics",
    )
    return parser


def replay(expected: List[Key], steps: List[List[Key]], auto_reset: bool, trace: Optional[bool]) -> bool:
    """Run the steps through a fresh sequence; return whether it completed."""
    source = SteppedInputSource(tokens=Key)
    sequence = keyboard_sequence(source, *expected, auto_reset=auto_reset, trace=trace)

    for held in steps:
        source.step(held)
        if sequence.trace:
            logger.info(f"step {source.step_count}: {source.state}")
        sequence.update_sequence()
        if sequence.completed:
            logger.info(f"Sequence completed at step {source.step_count}")
            return True

    logger.info(
        f"Sequence not completed after {len(steps)} steps "
        f"(progress {sequence.progress}/{len(sequence)})"
    )
    return False


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    try:
        cfg = get_config()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_BAD_INPUT
    setup_logger(logger.name, cfg.sequence.log_level)

    try:
        expected = [parse_key(name) for name in args.sequence]
        if args.script is not None:
            with open(args.script, encoding="utf-8") as f:
                steps = parse_script(f)
        else:
            steps = parse_script(stdin or sys.stdin)
    except ValueError as e:
        logger.error(f"Invalid key: {e}")
        return EXIT_BAD_INPUT

    completed = replay(expected, steps, auto_reset=not args.no_auto_reset, trace=args.trace)
    return EXIT_COMPLETED if completed else EXIT_INCOMPLETE


if __name__ == "__main__":
    sys.exit(main())
