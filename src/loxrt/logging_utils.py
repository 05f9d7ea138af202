"""Runtime logging helpers."""

from __future__ import annotations

import inspect
import logging
import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

from loxrt.config.settings import load_settings

LogProfile = Literal["default", "pretty"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


class InterceptHandler(logging.Handler):
    """Handler that forwards stdlib logging messages to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _build_pretty_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def parse_log_filter(filter_env: str) -> tuple[str, dict[str | None, str | int | bool]]:
    """Parse a LOXRT_LOG_FILTER value.

    Format: "level" or "level,module=level,..."
    Examples:
        - "info" - global INFO level
        - "debug,loxrt.eval=debug" - global DEBUG, loxrt.eval at DEBUG
        - "info,loxrt.eval=false" - global INFO, loxrt.eval disabled

    Returns:
        (global_level, module_filter_dict)
    """
    parts = [p.strip() for p in filter_env.lower().split(",")]

    filter_dict: dict[str | None, str | int | bool] = {}
    global_level = "info"

    for part in parts:
        if not part:
            continue
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            if level == "false":
                filter_dict[module] = False
            else:
                filter_dict[module] = level.upper()
        else:
            global_level = part

    return global_level, filter_dict


def _setup_stdlib_intercept() -> None:
    """Forward stdlib logging to loguru."""
    root_logger = logging.getLogger()
    if not any(isinstance(h, InterceptHandler) for h in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per profile."""
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    global_level, module_filter = parse_log_filter(load_settings().log_filter)

    logger.remove()

    if profile == "pretty":
        logger.add(
            _build_pretty_handler(),
            level=global_level.upper(),
            format="{message}",
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )
    else:
        logger.add(
            sys.stderr,
            level=global_level.upper(),
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )

    logger.enable("loxrt")
    _setup_stdlib_intercept()

    _CONFIGURED_PROFILE = profile
