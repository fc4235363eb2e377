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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "hashable_values",
    "int_lists",
    "mixed_values",
    "small_ints",
]


def small_ints() -> st.SearchStrategy[int]:
    """Return a strategy of small integers so duplicates are common."""
    return st.integers(min_value=-5, max_value=5)


def int_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy of integer lists with frequent repeats.

    Args:
        max_size: Maximum list length.

    Returns:
        Hypothesis strategy producing possibly empty lists of small integers.
    """
    return st.lists(small_ints(), max_size=max_size)


def hashable_values(max_size: int = 30) -> st.SearchStrategy[list[object]]:
    """Return lists mixing ints, short strings and tuples of ints."""
    scalar = st.one_of(small_ints(), st.text(alphabet="ab", max_size=2), st.tuples(small_ints()))
    return st.lists(scalar, max_size=max_size)


def mixed_values(max_size: int = 20) -> st.SearchStrategy[list[object]]:
    """Return lists mixing hashable scalars with unhashable lists and dicts."""
    scalar = st.one_of(small_ints(), st.text(alphabet="ab", max_size=2))
    unhashable = st.one_of(
        st.lists(small_ints(), max_size=2),
        st.dictionaries(st.sampled_from("ab"), small_ints(), max_size=1),
    )
    return st.lists(st.one_of(scalar, unhashable), max_size=max_size)
