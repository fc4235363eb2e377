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

"""Unit tests for Operations Search."""

from __future__ import annotations

import pytest

from seqops import MISSING, NOT_FOUND, Found, find, find_index
from tests.fixtures.people import Person

pytestmark = pytest.mark.unit


def _is_goofy(person: Person, _index: int) -> bool:
    return person.name == "Goofy" and person.age == 22


def _is_pluto(person: Person, _index: int) -> bool:
    return person.name == "Pluto"


def test_find_returns_element_and_index(people: list[Person]) -> None:
    result = find(people, _is_goofy)
    assert result == Found(Person(name="Goofy", age=22), 2)
    assert result.found is True
    assert result.value is people[2]
    assert result.index == 2


def test_find_result_unpacks_to_value_and_index(people: list[Person]) -> None:
    value, index = find(people, _is_goofy)
    assert value == Person(name="Goofy", age=22)
    assert index == 2


def test_find_reports_missing(people: list[Person]) -> None:
    result = find(people, _is_pluto)
    assert result is MISSING
    assert not result
    assert result.value is None
    assert result.index == NOT_FOUND
    value, index = result
    assert value is None
    assert index == -1


def test_find_returns_first_of_several_matches() -> None:
    result = find([5, 8, 10, 12], lambda value, _index: value % 2 == 0)
    assert result.as_tuple() == (8, 1)


def test_find_passes_index_to_predicate() -> None:
    result = find(["x", "y", "z"], lambda _value, index: index == 2)
    assert result.as_tuple() == ("z", 2)


def test_find_result_outlives_the_source_list(people: list[Person]) -> None:
    result = find(people, _is_goofy)
    people.clear()
    assert result.value == Person(name="Goofy", age=22)


def test_find_index_mirrors_find(people: list[Person]) -> None:
    assert find_index(people, _is_goofy) == 2
    assert find_index(people, _is_pluto) == NOT_FOUND


def test_find_on_empty_sequence() -> None:
    empty: list[int] = []
    assert find(empty, lambda _value, _index: True) is MISSING
    assert find_index(empty, lambda _value, _index: True) == -1
