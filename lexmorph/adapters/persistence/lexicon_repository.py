# lexmorph/adapters/persistence/lexicon_repository.py
import threading
from typing import Iterable, Iterator, List, Optional

import structlog

from lexmorph.core.domain.models import LexEntry, MorphForm

logger = structlog.get_logger()


class InMemoryLexiconRepository:
    """
    In-memory store of lexical entries and the morph forms they own.

    Deleted entries stay in the store (flagged invalid) so that their forms
    show up as orphans to scans, as they would in a live database.
    Every mutation bumps `version`, which invalidates the morph index.
    """

    def __init__(self, entries: Optional[Iterable[LexEntry]] = None):
        self._lock = threading.RLock()
        self._entries: List[LexEntry] = list(entries or [])
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def touch(self) -> None:
        with self._lock:
            self._version += 1

    def add_entry(self, entry: LexEntry) -> LexEntry:
        with self._lock:
            self._entries.append(entry)
            self._version += 1
        return entry

    def delete_entry(self, entry: LexEntry) -> None:
        with self._lock:
            entry.delete()
            self._version += 1
        logger.debug("lex_entry_deleted", entry_id=entry.id)

    def get_entry(self, entry_id: str) -> Optional[LexEntry]:
        return next((e for e in self._entries if e.id == entry_id), None)

    def entries(self) -> List[LexEntry]:
        return list(self._entries)

    def all_forms(self) -> Iterator[MorphForm]:
        for entry in self.entries():
            yield from entry.allomorphs()

    def __len__(self) -> int:
        return len(self._entries)
