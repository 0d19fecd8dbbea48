"""Loguru configuration for the storefront API.

Each record is stamped with the request's correlation id and the caller's
user id (``-`` outside a request or for anonymous callers). Every sink runs
:func:`sanitize_record` first, so bearer tokens and passwords are masked
before anything is written.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> "
    "<yellow>{extra[user_id]}</yellow> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)
_FILE_FORMAT = (
    "{time:YYYY-MM-DDTHH:mm:ss.SSSZZ} | {level:<8} | {extra[service]} | "
    "{extra[correlation_id]} {extra[user_id]} | {name}:{line} | {message}"
)

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")
_user_id: ContextVar[str] = ContextVar("user_id", default="-")


def _stamp_request_context(record: dict[str, Any]) -> None:
    extra = record["extra"]
    extra["correlation_id"] = _correlation_id.get()
    extra["user_id"] = _user_id.get()
    extra.setdefault("service", "storefront-api")


class _InterceptHandler(logging.Handler):
    """Forwards stdlib records (werkzeug, flask-cors) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or "-")


def set_user_id(value: str | None) -> None:
    _user_id.set(value or "-")


def clear_correlation_id() -> None:
    _correlation_id.set("-")
    _user_id.set("-")


def setup_logging(
    level: str | None = None,
    log_file: Path | str | None = None,
    *,
    json_logs: bool = False,
    service: str = "storefront-api",
) -> None:
    """(Re)build every sink. Safe to call once per created app."""

    level = (level or "INFO").upper()

    _logger.remove()
    _logger.configure(extra={"service": service}, patcher=_stamp_request_context)

    if json_logs:
        _logger.add(sys.stderr, level=level, serialize=True, filter=sanitize_record)
    else:
        _logger.add(
            sys.stderr,
            level=level,
            format=_CONSOLE_FORMAT,
            colorize=True,
            backtrace=False,
            diagnose=False,
            filter=sanitize_record,
        )

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            path,
            level=level,
            format=_FILE_FORMAT,
            rotation="10 MB",
            retention=5,
            enqueue=True,
            encoding="utf-8",
            backtrace=False,
            diagnose=False,
            filter=sanitize_record,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.WARNING if json_logs else logging.INFO)


_logger.configure(extra={"service": "storefront-api"}, patcher=_stamp_request_context)

logger = _logger

__all__ = [
    "clear_correlation_id",
    "logger",
    "set_correlation_id",
    "set_user_id",
    "setup_logging",
]
