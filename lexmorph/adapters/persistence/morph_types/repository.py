# lexmorph/adapters/persistence/morph_types/repository.py
"""
In-memory morph-type table.

Keeps the types in their declared order (classification scans them in that
order) plus an id index. Replacing the table bumps `version`, which
invalidates marker sets derived from it.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

from lexmorph.core.domain.exceptions import MorphTypeNotFoundError, MorphTypeTableError
from lexmorph.core.domain.models import MorphType


def _type_id(type_id) -> str:
    if isinstance(type_id, Enum):
        return type_id.value
    return type_id


class InMemoryMorphTypeRepository:
    """Morph-type table held in memory."""

    def __init__(self, morph_types: Iterable[MorphType] = (), *, source: str = "<memory>"):
        self.source = source
        self._lock = threading.RLock()
        self._version = 0
        self._types: Tuple[MorphType, ...] = ()
        self._by_id: Dict[str, MorphType] = {}
        self.replace(morph_types)

    @property
    def version(self) -> int:
        return self._version

    def replace(self, morph_types: Iterable[MorphType]) -> None:
        """Swap in a new table. Duplicate ids are rejected."""
        types = tuple(morph_types)
        by_id: Dict[str, MorphType] = {}
        for mt in types:
            if mt.id in by_id:
                raise MorphTypeTableError(self.source, f"duplicate morph type id '{mt.id}'")
            by_id[mt.id] = mt

        with self._lock:
            self._types = types
            self._by_id = by_id
            self._version += 1

    def all_types(self) -> Sequence[MorphType]:
        return self._types

    def get(self, type_id: str) -> MorphType:
        found = self._by_id.get(_type_id(type_id))
        if found is None:
            raise MorphTypeNotFoundError(_type_id(type_id))
        return found

    def find(self, type_id: str) -> Optional[MorphType]:
        return self._by_id.get(_type_id(type_id))

    def __contains__(self, type_id: str) -> bool:
        return _type_id(type_id) in self._by_id

    def __iter__(self) -> Iterator[MorphType]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)


__all__ = ["InMemoryMorphTypeRepository"]
