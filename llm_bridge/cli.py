"""CLI entry point: read a job from STDIN, write one envelope line to STDOUT."""

import argparse
import asyncio
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from . import __version__
from .config.settings import Settings
from .jobs import write_envelope
from .models.envelope import ErrorCode, failure
from .observability.logging import configure_logging
from .pipeline import run_job


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-bridge",
        description="Forward a JSON job on STDIN to an LLM provider and print one JSON envelope."
    )
    parser.add_argument('--log-level', help='Log level for stderr output (default: WARNING)')
    parser.add_argument('--show-warnings', action='store_true', help='Let provider SDK warnings through')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI function. Always exits with status 0."""
    args = build_parser().parse_args(argv)

    load_dotenv()
    settings = Settings.from_env(os.environ)
    overrides = {}
    if args.log_level:
        overrides['log_level'] = args.log_level
    if args.show_warnings:
        overrides['log_warnings'] = True
    if overrides:
        settings = Settings(**{**settings.model_dump(), **overrides})
    configure_logging(settings)

    try:
        raw = sys.stdin.read()
    except (OSError, ValueError) as e:
        envelope = failure(ErrorCode.INPUT, f"Failed to read STDIN: {e}")
    else:
        envelope = asyncio.run(run_job(raw, settings))
    write_envelope(envelope, sys.stdout)
    sys.exit(0)


if __name__ == "__main__":
    main()
