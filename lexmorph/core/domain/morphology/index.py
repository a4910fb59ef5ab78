# lexmorph/core/domain/morphology/index.py
"""
morphology/index.py

In-memory hash index over monomorphemic morph forms.

Matching each of many query strings against tens of thousands of stored
forms by scanning is quadratic. The index is keyed by (writing system, text),
so a batch of queries costs one dictionary probe each.

Semantics
---------
- One key per writing-system alternative of each indexed form.
- On duplicate keys the last form encountered wins.
- Lookups never insert: a missing key leaves the caller's slot untouched.
- `resolve` re-reads ownership on every hit: a form whose entry was deleted
  after the build is treated as a miss.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, MutableMapping, Optional, Tuple

import structlog

from lexmorph.core.domain.models import MorphForm, RichText
from lexmorph.core.domain.morphology.matching import is_monomorphemic

logger = structlog.get_logger()

MorphKey = Tuple[int, str]


class MorphIndex:
    """Read-only (writing system, text) -> MorphForm mapping."""

    def __init__(self, entries: Optional[Dict[MorphKey, MorphForm]] = None):
        self._entries: Dict[MorphKey, MorphForm] = dict(entries or {})

    @classmethod
    def build(cls, forms: Iterable[MorphForm]) -> "MorphIndex":
        """Index every writing-system alternative of every form given."""
        entries: Dict[MorphKey, MorphForm] = {}
        for mf in forms:
            for alternative in mf.alternatives():
                entries[alternative.key] = mf
        return cls(entries)

    @classmethod
    def build_monomorphemic(cls, forms: Iterable[MorphForm]) -> "MorphIndex":
        """Index only the live, unbound stem allomorphs among `forms`."""
        index = cls.build(mf for mf in forms if is_monomorphemic(mf))
        logger.info("morph_index_built", entries=len(index))
        return index

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, morph_form: RichText) -> Optional[MorphForm]:
        return self._entries.get(morph_form.key)

    def resolve(self, collector: MutableMapping[RichText, Optional[MorphForm]]) -> int:
        """
        Fill `collector` in place: each key whose indexed form is still a live
        monomorphemic form gets it as its value; other keys keep their
        current value.

        Returns:
            The number of keys that were matched.
        """
        hits = 0
        for key in list(collector.keys()):
            found = self._entries.get(key.key)
            if found is not None and is_monomorphemic(found):
                collector[key] = found
                hits += 1
        return hits

    def __contains__(self, morph_form: RichText) -> bool:
        return morph_form.key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> Iterator[MorphKey]:
        yield from self._entries.keys()


__all__ = ["MorphKey", "MorphIndex"]
