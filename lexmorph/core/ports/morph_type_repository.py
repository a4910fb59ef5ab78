# lexmorph/core/ports/morph_type_repository.py
from typing import Optional, Protocol, Sequence

from lexmorph.core.domain.models import MorphType


class IMorphTypeRepository(Protocol):
    """
    Port for the morph-type table.
    Implementations could be an in-memory table loaded from JSON or a
    view over a lexical database.
    """

    @property
    def version(self) -> int:
        """Monotonic counter, bumped whenever the table changes."""
        ...

    def all_types(self) -> Sequence[MorphType]:
        """
        Returns every morph type in the table's stable enumeration order.
        """
        ...

    def get(self, type_id: str) -> MorphType:
        """
        Retrieves a morph type by id.

        Raises:
            MorphTypeNotFoundError: if the id is not in the table.
        """
        ...

    def find(self, type_id: str) -> Optional[MorphType]:
        """Retrieves a morph type by id, or None if absent."""
        ...
