# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging setup for seqops.

The library only creates loggers under ``seqops``; nothing is printed until an
application calls ``configure_logging``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Final, cast

from seqops.compat import UTC, TypedDict, Unpack, override
from seqops.core.model_types import DedupeStrategy, LogComponent, LogFormat

ROOT_LOGGER_NAME: Final[str] = "seqops"
LOG_FORMAT_ENV: Final[str] = "SEQOPS_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "SEQOPS_LOG_LEVEL"

_LEVELS: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_EXTRA_FIELDS: Final[tuple[str, ...]] = ("component", "operation", "strategy", "path")


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Format and level applied by ``configure_logging``."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """One JSON object per record, carrying the seqops extras when present."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({name: getattr(record, name) for name in _EXTRA_FIELDS if hasattr(record, name)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # StrEnum members serialise as their values; anything else falls back to str()
        return json.dumps(payload, ensure_ascii=False, default=str)


def _resolve_level(level: str | int) -> tuple[int, str]:
    if isinstance(level, int):
        return level, logging.getLevelName(level).lower()
    name = level.strip().lower()
    if name not in _LEVELS:
        msg = f"Unknown log level '{level}'; expected one of {', '.join(_LEVELS)}"
        raise ValueError(msg)
    return _LEVELS[name], name


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Install a single handler on the ``seqops`` logger.

    Args:
        log_format: ``text`` or ``json``. ``None`` reads ``SEQOPS_LOG_FORMAT``,
            then defaults to ``text``.
        log_level: Level name or number. ``None`` reads ``SEQOPS_LOG_LEVEL``,
            then defaults to ``info``.

    Returns:
        The format and level that were applied.

    Raises:
        ValueError: If the format or level name is unknown, whether it came
            from an argument or the environment.
    """
    raw_format = log_format if log_format is not None else os.getenv(LOG_FORMAT_ENV) or LogFormat.TEXT
    selected = raw_format if isinstance(raw_format, LogFormat) else LogFormat.from_str(raw_format)
    level_value, level_name = _resolve_level(log_level if log_level is not None else os.getenv(LOG_LEVEL_ENV) or "info")

    handler = logging.StreamHandler()
    if selected is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level_value)
    logger.propagate = False
    return LogConfig(format=selected, level=level_value, level_name=level_name)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """``extra=`` payload understood by ``JSONLogFormatter``."""

    operation: str
    strategy: DedupeStrategy
    path: str


class _StructuredLogKwargs(TypedDict, total=False):
    operation: str
    strategy: DedupeStrategy | str
    path: str | os.PathLike[str]


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Build the ``extra`` mapping for a seqops log record, dropping ``None`` fields."""
    extra: StructuredLogExtra = {"component": component}
    payload = cast("dict[str, object]", kwargs)
    operation = payload.get("operation")
    if operation is not None:
        extra["operation"] = str(operation)
    strategy = payload.get("strategy")
    if strategy is not None:
        extra["strategy"] = DedupeStrategy.coerce(cast("DedupeStrategy | str", strategy))
    path = payload.get("path")
    if path is not None:
        extra["path"] = os.fspath(cast("str | os.PathLike[str]", path))
    return extra


__all__ = ["JSONLogFormatter", "LogConfig", "StructuredLogExtra", "configure_logging", "structured_extra"]
