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

"""seqops - higher-order operations over in-memory sequences.

Deduplication, containment and index lookup, reduce, filter, map, for-each,
find, find-index and every/some predicates, each a single left-to-right pass
that never mutates its input.
"""

from __future__ import annotations

from seqops._internal.exceptions import SeqopsError, SeqopsTypeError
from seqops._internal.logging_utils import configure_logging

from .config import Config, SeqopsValidationError, load_config
from .core.model_types import DedupeStrategy
from .operations import (
    UnhashableElementError,
    contains,
    every,
    filter,  # noqa: A004
    find,
    find_index,
    for_each,
    index_of,
    map,  # noqa: A004
    merge_unique,
    reduce,
    remove_duplicates,
    some,
)
from .results import MISSING, NOT_FOUND, Found, Missing, SearchResult

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "NOT_FOUND",
    "Config",
    "DedupeStrategy",
    "Found",
    "Missing",
    "SearchResult",
    "SeqopsError",
    "SeqopsTypeError",
    "SeqopsValidationError",
    "UnhashableElementError",
    "__version__",
    "configure_logging",
    "contains",
    "every",
    "filter",
    "find",
    "find_index",
    "for_each",
    "index_of",
    "load_config",
    "map",
    "merge_unique",
    "reduce",
    "remove_duplicates",
    "some",
]
