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

"""Configuration discovery and loading for seqops.

Looks for ``seqops.toml``, ``.seqops.toml`` and the ``[tool.seqops]`` table of
``pyproject.toml`` in a base directory and validates the first one that
carries seqops settings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from seqops._internal.logging_utils import structured_extra
from seqops.compat import tomllib
from seqops.core.model_types import LogComponent

from .models import (
    CURRENT_CONFIG_VERSION,
    Config,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
    config_from_model,
)

logger: logging.Logger = logging.getLogger("seqops.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("seqops.toml", ".seqops.toml", "pyproject.toml")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: File the configuration was loaded from, or None for defaults.
    """

    config: Config
    path: Path | None


def load_config(explicit_path: Path | str | None = None, *, base_dir: Path | None = None) -> Config:
    """Load seqops configuration from TOML or fall back to defaults.

    Args:
        explicit_path: Configuration file to read. When given, no other
            location is searched.
        base_dir: Directory searched when ``explicit_path`` is None. Defaults
            to the current working directory.

    Returns:
        The resolved configuration.
    """
    return load_config_with_metadata(explicit_path, base_dir=base_dir).config


def load_config_with_metadata(
    explicit_path: Path | str | None = None,
    *,
    base_dir: Path | None = None,
) -> LoadedConfig:
    """Load seqops configuration together with the file it came from.

    Search order is ``seqops.toml``, ``.seqops.toml`` then ``pyproject.toml``;
    a ``pyproject.toml`` without a ``[tool.seqops]`` table is skipped. A
    standalone file may hold the settings at top level or under
    ``[tool.seqops]``.

    Args:
        explicit_path: Configuration file to read instead of searching.
        base_dir: Directory to search. Defaults to the current directory.

    Returns:
        LoadedConfig: Parsed configuration and its source path (None when
        defaults are used).

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed.
        InvalidConfigFileError: If the settings fail validation, or an
            explicit file holds no seqops settings.
        UnsupportedConfigVersionError: If ``config_version`` is not supported.
    """
    if explicit_path is not None:
        candidate = _resolve_candidate_path(Path(explicit_path))
        loaded = _load_candidate_config(candidate, explicit=True)
        # explicit candidates either load or raise
        return cast("LoadedConfig", loaded)

    root = (base_dir or Path.cwd()).resolve()
    for filename in CONFIG_FILENAMES:
        loaded = _load_candidate_config(root / filename, explicit=False)
        if loaded is not None:
            return loaded
    logger.debug(
        "No seqops configuration found under %s; using defaults",
        root,
        extra=structured_extra(LogComponent.CONFIG, path=root),
    )
    return LoadedConfig(config=Config(), path=None)


def _resolve_candidate_path(candidate: Path) -> Path:
    return candidate if candidate.is_absolute() else (Path.cwd() / candidate).resolve()


def _load_candidate_config(candidate: Path, *, explicit: bool) -> LoadedConfig | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError(str(candidate)))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_seqops_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define seqops configuration; add a [tool.seqops] section"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc
    if model.config_version != CURRENT_CONFIG_VERSION:
        raise UnsupportedConfigVersionError(model.config_version, CURRENT_CONFIG_VERSION)

    resolved = candidate.resolve()
    logger.debug(
        "Loaded seqops configuration from %s",
        resolved,
        extra=structured_extra(
            LogComponent.CONFIG,
            path=resolved,
            strategy=model.dedupe_strategy,
        ),
    )
    return LoadedConfig(config=config_from_model(model), path=resolved)


def _extract_seqops_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Extract the seqops settings from a parsed TOML document.

    Args:
        candidate: Source configuration path.
        raw_map: Data parsed from the TOML document.

    Returns:
        Mapping to validate, or None when a ``pyproject.toml`` carries no
        seqops table.

    Raises:
        InvalidConfigFileError: If ``[tool]`` or ``[tool.seqops]`` is not a table.
    """
    is_pyproject = candidate.name == "pyproject.toml"
    tool_section = raw_map.get("tool")
    if tool_section is not None and not isinstance(tool_section, dict):
        if is_pyproject:
            message = "[tool] in pyproject.toml must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        tool_section = None

    if isinstance(tool_section, dict):
        section = cast("dict[str, object]", tool_section).get("seqops")
        if section is not None and not isinstance(section, dict):
            message = "[tool.seqops] must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        if isinstance(section, dict):
            return cast("dict[str, object]", section)

    if is_pyproject:
        return None
    return {key: value for key, value in raw_map.items() if key != "tool"}


__all__ = ["CONFIG_FILENAMES", "LoadedConfig", "load_config", "load_config_with_metadata"]
