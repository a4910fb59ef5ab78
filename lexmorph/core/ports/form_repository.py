# lexmorph/core/ports/form_repository.py
from typing import Iterable, Protocol

from lexmorph.core.domain.models import LexEntry, MorphForm


class IFormRepository(Protocol):
    """
    Port for the live set of lexical entries and the morph forms they own.
    """

    @property
    def version(self) -> int:
        """Monotonic counter, bumped whenever entries or forms change."""
        ...

    def entries(self) -> Iterable[LexEntry]:
        """Returns every entry known to the repository (including deleted ones)."""
        ...

    def all_forms(self) -> Iterable[MorphForm]:
        """Returns every morph form, whatever its storage class or owner state."""
        ...

    def touch(self) -> None:
        """Signals an in-place change to an entry or form."""
        ...
