# -*- coding: utf-8 -*-
"""Opt-in structlog setup for hosts that do not configure logging themselves.

Package code only calls structlog.get_logger(). The host's own root
handlers are never replaced: a console handler is added only when the
root logger has none.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, Optional

import structlog
from structlog.types import Processor

from wallet_account_utils.config import get_settings

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _renderer(json_format: bool) -> Any:
    if json_format:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[LevelName] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Route structlog through stdlib logging.

    Args:
        level: Minimum level for the fallback console handler. Defaults to
            LOGGING__LEVEL.
        json_format: Render events as JSON instead of console text. Defaults
            to LOGGING__JSON_FORMAT.
    """
    logging_settings = get_settings().logging
    level = level or logging_settings.level
    if json_format is None:
        json_format = logging_settings.json_format

    # No-op when the host already attached root handlers.
    logging.basicConfig(level=getattr(logging, level), format="%(message)s")

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _renderer(json_format),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
