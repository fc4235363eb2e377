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

"""Higher-order operations over in-memory sequences.

Every function walks its input left to right, passing ``(element, index)`` to
callbacks (``reduce`` passes ``(accumulator, element)`` only), and returns a
new value without mutating the input. Equality-based lookups follow Python's
container semantics: an element matches when it *is* the target or compares
equal to it.

"Not found" is an ordinary outcome: integer lookups return ``NOT_FOUND``
(``-1``) and ``find`` returns ``MISSING``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from seqops._internal.exceptions import SeqopsTypeError
from seqops._internal.logging_utils import structured_extra
from seqops.core.model_types import DedupeStrategy, LogComponent
from seqops.results import MISSING, NOT_FOUND, Found

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from seqops.core.type_aliases import Predicate, Reducer, Transform, Visitor
    from seqops.results import SearchResult

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")

logger: logging.Logger = logging.getLogger("seqops.operations")


class UnhashableElementError(SeqopsTypeError):
    """Raised when hashed deduplication meets an element that cannot be hashed."""

    def __init__(self, value: object, index: int, source: str | None = None) -> None:
        """Initialise the error with the offending element.

        Args:
            value: Element whose ``hash()`` failed.
            index: Position of the element within ``source``.
            source: Name of the input holding the element when more than one
                input is being merged, such as ``"addition"``.
        """
        self.value = value
        self.index = index
        self.source = source
        type_name = type(value).__name__
        location = f"index {index}" if source is None else f"index {index} of {source}"
        super().__init__(
            f"Element at {location} of type '{type_name}' is unhashable; "
            f"use the '{DedupeStrategy.SCAN}' or '{DedupeStrategy.AUTO}' dedupe strategy",
        )


def _matches(item: object, element: object) -> bool:
    return item is element or item == element


def _is_hashable(value: object) -> bool:
    try:
        _ = hash(value)
    except TypeError:
        return False
    return True


def index_of(list_: Sequence[T], element: T) -> int:
    """Return the index of the first item equal to ``element``.

    Args:
        list_: Sequence to search.
        element: Value to look for.

    Returns:
        Zero-based index of the first match, or ``NOT_FOUND`` (``-1``).
    """
    for index, item in enumerate(list_):
        if _matches(item, element):
            return index
    return NOT_FOUND


def contains(list_: Sequence[T], element: T) -> bool:
    """Return True when some item of ``list_`` equals ``element``."""
    return index_of(list_, element) >= 0


class _UniqueCollector:
    """Accumulates first occurrences using the selected membership strategy."""

    __slots__ = ("_fallback_logged", "_operation", "_seen", "_strategy", "_unhashable", "items")

    def __init__(self, strategy: DedupeStrategy, operation: str) -> None:
        self._strategy = strategy
        self._operation = operation
        self._seen: set[object] = set()
        self._unhashable: list[object] = []
        self._fallback_logged = False
        self.items: list[object] = []

    def add(self, value: object, index: int, source: str | None = None) -> None:
        if self._strategy is DedupeStrategy.SCAN:
            if not contains(self.items, value):
                self.items.append(value)
            return
        if _is_hashable(value):
            if value in self._seen or (self._unhashable and contains(self._unhashable, value)):
                return
            self._seen.add(value)
            self.items.append(value)
            return
        if self._strategy is DedupeStrategy.HASHED:
            raise UnhashableElementError(value, index, source)
        self._log_fallback(value, index, source)
        # unhashable values can still equal hashable ones, so scan the full output
        if not contains(self.items, value):
            self._unhashable.append(value)
            self.items.append(value)

    def _log_fallback(self, value: object, index: int, source: str | None) -> None:
        if self._fallback_logged:
            return
        self._fallback_logged = True
        logger.debug(
            "Unhashable %s at index %d%s; using containment scan for unhashable elements",
            type(value).__name__,
            index,
            "" if source is None else f" of {source}",
            extra=structured_extra(
                LogComponent.OPERATIONS,
                operation=self._operation,
                strategy=self._strategy,
            ),
        )


def remove_duplicates(
    list_: Sequence[T],
    *,
    strategy: DedupeStrategy | str | None = DedupeStrategy.AUTO,
) -> list[T]:
    """Return a new list holding each distinct item once, in first-occurrence order.

    ``[1, 1, 2, 3, 4, 5, 4]`` becomes ``[1, 2, 3, 4, 5]``. Applying the
    function to its own output returns an equal list.

    Args:
        list_: Sequence to deduplicate. It is not modified.
        strategy: Membership strategy. ``scan`` compares every item against
            the output built so far (quadratic, equality only); ``hashed``
            uses a set and requires hashable items; ``auto`` uses the set
            where it can and scans for unhashable items. ``None`` means
            ``auto``.

    Returns:
        The deduplicated list.

    Raises:
        UnhashableElementError: If ``strategy`` is ``hashed`` and an item
            cannot be hashed.
        ValueError: If ``strategy`` names no known strategy.
    """
    collector = _UniqueCollector(DedupeStrategy.coerce(strategy), "remove_duplicates")
    for index, value in enumerate(list_):
        collector.add(value, index)
    return collector.items  # pyright: ignore[reportReturnType]


def merge_unique(
    base: Iterable[T],
    addition: Iterable[T],
    *,
    strategy: DedupeStrategy | str | None = DedupeStrategy.AUTO,
) -> list[T]:
    """Combine two inputs, keeping only the first occurrence of each item.

    Args:
        base: Items that establish the output order.
        addition: Items appended only if they have not appeared yet.
        strategy: Membership strategy, as for ``remove_duplicates``.

    Returns:
        ``remove_duplicates(base)`` followed by the unseen items of ``addition``.

    Raises:
        UnhashableElementError: If ``strategy`` is ``hashed`` and an item
            cannot be hashed. Its ``source`` names the input holding the item
            and ``index`` is the position within that input.
    """
    collector = _UniqueCollector(DedupeStrategy.coerce(strategy), "merge_unique")
    for source, chunk in (("base", base), ("addition", addition)):
        for index, value in enumerate(chunk):
            collector.add(value, index, source)
    return collector.items  # pyright: ignore[reportReturnType]


def reduce(source: Sequence[T], f: Reducer[A, T], initial_value: A) -> A:  # noqa: A001
    """Fold ``source`` from the left into a single value.

    The reducer receives the previous accumulator and the current element;
    unlike the other callbacks it is not given the index. The accumulator
    starts at ``initial_value`` and may have a different type than the
    elements.

    Args:
        source: Sequence to traverse.
        f: Reducer ``(accumulator, element) -> accumulator``.
        initial_value: Accumulator for the first call, and the result for an
            empty ``source``.

    Returns:
        The accumulator after the last element.
    """
    acc = initial_value
    for value in source:
        acc = f(acc, value)
    return acc


def filter(source: Sequence[T], f: Predicate[T]) -> list[T]:  # noqa: A001
    """Return the items for which ``f(item, index)`` is true, in order.

    The result is always a list; it is empty when nothing passes.
    """
    return [value for index, value in enumerate(source) if f(value, index)]


def map(source: Sequence[T], f: Transform[T, R]) -> list[R]:  # noqa: A001
    """Return ``[f(item, index) for each item]``; the length always matches ``source``."""
    return [f(value, index) for index, value in enumerate(source)]


def for_each(source: Sequence[T], f: Visitor[T]) -> None:
    """Call ``f(item, index)`` once per item, in order.

    Return values of ``f`` are ignored. Side effects, including writes back
    into ``source`` through the index, are the caller's business.
    """
    for index, value in enumerate(source):
        _ = f(value, index)


def every(source: Sequence[T], f: Predicate[T]) -> bool:
    """Return False at the first item failing ``f``; True when all pass or ``source`` is empty."""
    for index, value in enumerate(source):
        if not f(value, index):
            return False
    return True


def some(source: Sequence[T], f: Predicate[T]) -> bool:
    """Return True at the first item passing ``f``; False when none pass or ``source`` is empty."""
    for index, value in enumerate(source):
        if f(value, index):
            return True
    return False


def find(source: Sequence[T], f: Predicate[T]) -> SearchResult[T]:
    """Return the first item satisfying ``f`` together with its index.

    Args:
        source: Sequence to search.
        f: Predicate ``(element, index) -> bool``.

    Returns:
        ``Found(value, index)`` holding the element object from ``source``,
        or ``MISSING`` (value ``None``, index ``-1``) when nothing matches.
    """
    for index, value in enumerate(source):
        if f(value, index):
            return Found(value, index)
    return MISSING


def find_index(source: Sequence[T], f: Predicate[T]) -> int:
    """Return the index of the first item satisfying ``f``, or ``NOT_FOUND``."""
    for index, value in enumerate(source):
        if f(value, index):
            return index
    return NOT_FOUND


__all__ = [
    "UnhashableElementError",
    "contains",
    "every",
    "filter",
    "find",
    "find_index",
    "for_each",
    "index_of",
    "map",
    "merge_unique",
    "reduce",
    "remove_duplicates",
    "some",
]
