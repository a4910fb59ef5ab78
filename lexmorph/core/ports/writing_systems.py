# lexmorph/core/ports/writing_systems.py
from typing import Optional, Protocol, Sequence

from lexmorph.core.domain.models import RichText


class IWritingSystemService(Protocol):
    """
    Port for writing-system configuration.
    """

    @property
    def current_vernacular_ws(self) -> Sequence[int]:
        """Ids of the writing systems currently configured as vernacular."""
        ...

    @property
    def default_vernacular_ws(self) -> int:
        """Id of the default vernacular writing system."""
        ...

    def is_vernacular(self, ws: int) -> bool:
        ...

    def make_text(self, text: str, ws: Optional[int] = None) -> RichText:
        """Tags plain text with a writing system (default vernacular if omitted)."""
        ...
