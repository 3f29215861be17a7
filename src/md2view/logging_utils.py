"""Centralized logging utilities for the md2view CLI and host integrations."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2view/logging_utils.py
from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "md2view"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.WARNING)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the md2view command line.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file receiving a copy of the output.
    trace_mode : bool, default False
        When true, include timestamps and logger names so render diagnostics
        can be traced back to the emitting module.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger


def enable_render_diagnostics() -> None:
    """Lower the md2view logger to DEBUG so dispatch and tree dumps are emitted.

    Render diagnostics gated by ``RenderConfig.debug`` are logged at DEBUG
    level; hosts that leave the root logger at WARNING call this to see them
    without turning on DEBUG output for every other library.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    for handler in logging.getLogger().handlers:
        if handler.level > logging.DEBUG:
            handler.setLevel(logging.DEBUG)
