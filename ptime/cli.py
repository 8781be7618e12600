"""CLI entrypoints for ptime commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .errors import EXIT_FAILURE, PtimeError
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator, clamp_width
from .render import DEFAULT_WIDTH, MAX_WIDTH


def _width_arg(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid value {value!r}: expected an integer"
        ) from None
    if width < 1:
        raise argparse.ArgumentTypeError(
            f"invalid value {value!r}: width must be at least 1"
        )
    return clamp_width(width)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_directory_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to scan (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ptime",
        description="Analyze photo timestamps from JPEG files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    oldest_parser = subparsers.add_parser("oldest", help="Find the oldest photo.")
    _add_verbose_option(oldest_parser, suppress_default=True)
    _add_directory_argument(oldest_parser)

    latest_parser = subparsers.add_parser("latest", help="Find the most recent photo.")
    _add_verbose_option(latest_parser, suppress_default=True)
    _add_directory_argument(latest_parser)

    hist_parser = subparsers.add_parser("hist", help="Show a histogram of photos by year.")
    _add_verbose_option(hist_parser, suppress_default=True)
    hist_parser.add_argument(
        "-w",
        "--width",
        type=_width_arg,
        default=None,
        help=(
            f"Width of the longest bar (default {DEFAULT_WIDTH}, "
            f"values above {MAX_WIDTH} are clamped)."
        ),
    )
    _add_directory_argument(hist_parser)

    return parser


def _run(orchestrator: Orchestrator, args: argparse.Namespace) -> List[str]:
    if args.command == "oldest":
        return orchestrator.run_oldest(args.directory)
    if args.command == "latest":
        return orchestrator.run_latest(args.directory)
    if args.command == "hist":
        return orchestrator.run_hist(args.directory, args.width)
    raise PtimeError(f"Unknown command: {args.command}")  # pragma: no cover - argparse enforces choices


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ptime commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        lines = _run(Orchestrator(), args)
    except PtimeError as exc:
        logger.debug("ptime %s failed", args.command, exc_info=True)
        parser.exit(exc.exit_code, f"ptime: error: {exc}\n")
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        parser.exit(EXIT_FAILURE, f"ptime: error: {exc}\n")

    if lines:
        print("\n".join(lines))


if __name__ == "__main__":
    main(sys.argv[1:])
