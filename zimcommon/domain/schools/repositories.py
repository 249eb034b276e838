# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from .entities import School


class SchoolRepository(Protocol):
    def list_all(self) -> Sequence[School]: ...
    def find_by_id(self, school_id: int) -> School | None: ...
    def find_many(self, school_ids: Iterable[int]) -> Sequence[School]: ...
    def add(self, school: School) -> School: ...
