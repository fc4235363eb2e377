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

"""Unit tests for Search Results."""

from __future__ import annotations

import pickle
from typing import Union, get_args

import pytest

from seqops.results import MISSING, NOT_FOUND, Found, Missing, SearchResult

pytestmark = pytest.mark.unit


def test_found_is_truthy_and_unpacks() -> None:
    result = Found("value", 3)
    assert result
    assert result.found is True
    assert tuple(result) == ("value", 3)
    assert result.as_tuple() == ("value", 3)


def test_found_with_falsy_value_is_still_truthy() -> None:
    assert Found(0, 0)
    assert Found(None, 5).found is True


def test_found_is_immutable() -> None:
    result = Found("value", 1)
    with pytest.raises(AttributeError):
        result.index = 2  # type: ignore[misc]


def test_missing_is_a_falsy_singleton() -> None:
    assert Missing() is MISSING
    assert not MISSING
    assert MISSING.found is False
    assert MISSING.value is None
    assert MISSING.index == NOT_FOUND == -1
    assert tuple(MISSING) == (None, -1)
    assert repr(MISSING) == "MISSING"


def test_missing_survives_pickling() -> None:
    assert pickle.loads(pickle.dumps(MISSING)) is MISSING  # noqa: S301


def test_found_and_missing_never_compare_equal() -> None:
    assert Found(None, -1) != MISSING


def test_search_result_alias_is_a_parametrisable_union() -> None:
    alias = SearchResult[int]
    assert alias == Union[Found[int], Missing]  # noqa: UP007
    assert get_args(alias) == (Found[int], Missing)
