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

"""Enumerations shared by the operations, configuration and logging layers."""

from __future__ import annotations

from seqops.compat import StrEnum


class DedupeStrategy(StrEnum):
    """Membership strategy used when removing duplicates.

    Attributes:
        AUTO: Hash-set membership for hashable elements, containment scan for
            the rest.
        HASHED: Hash-set membership only; every element must be hashable.
        SCAN: Containment scan over the output list. Quadratic, but relies on
            equality alone.
    """

    AUTO = "auto"
    HASHED = "hashed"
    SCAN = "scan"

    @classmethod
    def from_str(cls, raw: str) -> DedupeStrategy:
        """Create a DedupeStrategy from a string value.

        Args:
            raw: String representation of the strategy (case-insensitive).

        Returns:
            DedupeStrategy enum value.

        Raises:
            ValueError: If the string does not match any strategy.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown dedupe strategy '{raw}'"
            raise ValueError(msg) from exc

    @classmethod
    def coerce(cls, value: DedupeStrategy | str | None) -> DedupeStrategy:
        """Return ``value`` as a strategy, treating ``None`` as ``AUTO``."""
        if value is None:
            return cls.AUTO
        if isinstance(value, cls):
            return value
        return cls.from_str(str(value))


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable library components.

    Attributes:
        OPERATIONS: Sequence operations.
        CONFIG: Configuration loading.
    """

    OPERATIONS = "operations"
    CONFIG = "config"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        """Create a LogComponent enum from a string value.

        Raises:
            ValueError: If the string does not match any LogComponent value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log component '{raw}'"
            raise ValueError(msg) from exc


__all__ = ["DedupeStrategy", "LogComponent", "LogFormat"]
