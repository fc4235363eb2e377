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

"""Tagged results for sequence searches.

A search either produces ``Found(value, index)`` or the ``MISSING`` singleton.
Both expose ``value``, ``index`` and ``found`` and unpack as ``(value, index)``,
so callers that only want the legacy pair can write
``value, index = find(items, predicate)`` and compare ``index`` with
``NOT_FOUND``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final, Generic, Literal, TypeAlias, TypeVar, final

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")

NOT_FOUND: Final[int] = -1


@dataclass(slots=True, frozen=True)
class Found(Generic[T]):
    """A successful search: the matching element and its position.

    Attributes:
        value: The element object taken from the searched sequence.
        index: Zero-based position of ``value`` in the sequence.
    """

    value: T
    index: int

    @property
    def found(self) -> Literal[True]:
        return True

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T | int]:
        yield self.value
        yield self.index

    def as_tuple(self) -> tuple[T, int]:
        """Return the ``(value, index)`` pair."""
        return (self.value, self.index)


@final
class Missing:
    """The unsuccessful search outcome; falsy, with ``index == NOT_FOUND``."""

    __slots__ = ()

    _instance: ClassVar[Missing | None] = None
    value: ClassVar[None] = None
    index: ClassVar[int] = NOT_FOUND

    def __new__(cls) -> Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def found(self) -> Literal[False]:
        return False

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[None | int]:
        yield None
        yield NOT_FOUND

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"

    def as_tuple(self) -> tuple[None, int]:
        """Return the ``(None, NOT_FOUND)`` pair."""
        return (None, NOT_FOUND)


MISSING: Final[Missing] = Missing()

SearchResult: TypeAlias = Found[T] | Missing

__all__ = ["MISSING", "NOT_FOUND", "Found", "Missing", "SearchResult"]
