from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from redasync.app import run_once
from redasync.config import (
    LOG_LEVEL_ENV,
    ConfigurationError,
    configure_logging,
    get_app_config,
    optional_env_var,
)
from redasync.scheduling import serve

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Publish REDA inventory and funding to Google Sheets on a schedule"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single sync pass immediately and exit instead of waiting for the schedule",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging(level=optional_env_var(LOG_LEVEL_ENV, "INFO") or "INFO")
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        config = get_app_config()
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)

    if parsed_args.once:
        result = run_once(config)
        sys.exit(0 if result.ok else 1)

    serve(config)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
