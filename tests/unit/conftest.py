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

"""Fixtures shared across all unit tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.fixtures.people import Person, build_people

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def people() -> list[Person]:
    """Provide a fresh list of sample people.

    Returns:
        Four ``Person`` records ordered Mickey, Minnie, Goofy, Donald.
    """
    return build_people()


@pytest.fixture
def reset_seqops_logging() -> Iterator[None]:
    """Restore the ``seqops`` loggers to their unconfigured state around a test."""
    names = ("seqops", "seqops.operations", "seqops.config")

    def _reset() -> None:
        for name in names:
            logger = logging.getLogger(name)
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
            logger.propagate = True

    _reset()
    yield
    _reset()
