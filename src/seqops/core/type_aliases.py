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

"""Callback aliases used by the sequence operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeAlias, TypeVar

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")

Predicate: TypeAlias = Callable[[T, int], bool]
Transform: TypeAlias = Callable[[T, int], R]
Visitor: TypeAlias = Callable[[T, int], object]
Reducer: TypeAlias = Callable[[A, T], A]

LogLevelName = Literal["debug", "info", "warning", "error"]

__all__ = ["LogLevelName", "Predicate", "Reducer", "Transform", "Visitor"]
