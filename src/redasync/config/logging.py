"""Shared logging helpers for redasync."""

from __future__ import annotations

import logging

LOG_LEVEL_ENV = "REDASYNC_LOG_LEVEL"


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for a long-running service. Pass
    ``force=True`` to reconfigure during tests or specialised entry points.
    """

    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.strip().upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )
