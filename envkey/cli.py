"""envkey command line entry point.

Usage:
    envkey [--env-file PATH] [--max-attempts N] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from envkey.config import LOG_LEVELS, get_settings
from envkey.errors import EnvFileError
from envkey.logging_config import setup_logging
from envkey.prompts import TerminalPrompter
from envkey.services.env_file import EnvFile
from envkey.services.updater import upsert

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    """argparse type for --max-attempts."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _describe_settings_error(exc: ValidationError) -> str:
    """One line per bad ENVKEY_* variable, e.g. ``ENVKEY_MAX_ATTEMPTS: ...``."""
    parts = []
    for err in exc.errors():
        field = "_".join(str(loc) for loc in err["loc"]).upper()
        parts.append(f"ENVKEY_{field}: {err['msg']}")
    return "; ".join(parts)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from Settings."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="envkey",
        description="Add or update a *_KEY variable in a .env file.",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=settings.env_path,
        help=f"File to edit (default: {settings.env_path})",
    )
    parser.add_argument(
        "--max-attempts",
        type=_positive_int,
        default=settings.max_attempts,
        help="Tries allowed when retyping the current value",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
    )
    return parser


def run(args: argparse.Namespace, prompter: TerminalPrompter) -> int:
    """Ask for a key and value and apply them. Returns the exit code."""
    prompter.banner()
    raw_key, key = prompter.ask_key()
    value = prompter.ask_value()

    try:
        result = upsert(
            EnvFile(args.env_file), raw_key, key, value, prompter,
            max_attempts=args.max_attempts,
        )
    except EnvFileError as e:
        logger.debug("Update of %s failed", key, exc_info=True)
        prompter.error(str(e))
        return 1

    prompter.report(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    prompter = TerminalPrompter()
    try:
        args = build_parser().parse_args(argv)
    except ValidationError as e:
        prompter.error(f"invalid settings: {_describe_settings_error(e)}")
        return 1

    setup_logging(args.log_level)
    try:
        return run(args, prompter)
    except EOFError:
        prompter.error("input closed before the update finished")
        return 1
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
