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

"""Configuration models and errors for seqops.

TOML data is validated with pydantic and then frozen into the ``Config``
dataclass that callers pass around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, field_validator

from seqops._internal.exceptions import SeqopsError
from seqops.core.model_types import DedupeStrategy, LogFormat
from seqops.core.type_aliases import LogLevelName  # noqa: TC001

if TYPE_CHECKING:
    from pathlib import Path

CURRENT_CONFIG_VERSION: Final[int] = 0


class SeqopsValidationError(SeqopsError, ValueError):
    """Raised when input data fails validation checks."""


class ConfigValidationError(SeqopsValidationError):
    """Raised when configuration data contains invalid values."""


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The ``config_version`` found in the file.
            expected: The ``config_version`` this release understands.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: Configuration file that could not be read.
            error: The underlying exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: Configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid seqops configuration in {path}: {error}")


class ConfigModel(BaseModel):
    """Pydantic model for the ``[tool.seqops]`` table or a ``seqops.toml`` file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    config_version: int = CURRENT_CONFIG_VERSION
    dedupe_strategy: DedupeStrategy = DedupeStrategy.AUTO
    log_format: LogFormat = LogFormat.TEXT
    log_level: LogLevelName = "info"

    @field_validator("dedupe_strategy", "log_format", "log_level", mode="before")
    @classmethod
    def _normalise_choice(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


@dataclass(slots=True, frozen=True)
class Config:
    """Resolved seqops configuration.

    Attributes:
        dedupe_strategy: Strategy to pass to ``remove_duplicates``.
        log_format: Output format for ``configure_logging``.
        log_level: Verbosity for ``configure_logging``.
    """

    dedupe_strategy: DedupeStrategy = DedupeStrategy.AUTO
    log_format: LogFormat = LogFormat.TEXT
    log_level: LogLevelName = "info"


def config_from_model(model: ConfigModel) -> Config:
    """Convert a validated model into the runtime ``Config`` dataclass."""
    return Config(
        dedupe_strategy=model.dedupe_strategy,
        log_format=model.log_format,
        log_level=model.log_level,
    )


__all__ = [
    "CURRENT_CONFIG_VERSION",
    "Config",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "SeqopsValidationError",
    "UnsupportedConfigVersionError",
    "config_from_model",
]
