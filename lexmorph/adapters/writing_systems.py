# lexmorph/adapters/writing_systems.py
from typing import Optional, Sequence, Tuple

from lexmorph.core.domain.models import RichText
from lexmorph.shared.config import Settings


class StaticWritingSystemService:
    """
    Writing-system configuration fixed at construction time.

    Writing systems are plain integer ids; the vernacular list is ordered and
    its first member is the default unless another default is given.
    """

    def __init__(
        self,
        vernacular: Sequence[int],
        analysis: Sequence[int] = (),
        default_vernacular: Optional[int] = None,
    ):
        if not vernacular:
            raise ValueError("At least one vernacular writing system is required.")
        self._vernacular: Tuple[int, ...] = tuple(vernacular)
        self._analysis: Tuple[int, ...] = tuple(analysis)
        self._default = default_vernacular if default_vernacular is not None else self._vernacular[0]

    @classmethod
    def from_settings(cls, settings: Settings) -> "StaticWritingSystemService":
        return cls(
            vernacular=settings.VERNACULAR_WS_IDS,
            analysis=settings.ANALYSIS_WS_IDS,
            default_vernacular=settings.DEFAULT_VERNACULAR_WS,
        )

    @property
    def current_vernacular_ws(self) -> Tuple[int, ...]:
        return self._vernacular

    @property
    def current_analysis_ws(self) -> Tuple[int, ...]:
        return self._analysis

    @property
    def default_vernacular_ws(self) -> int:
        return self._default

    def is_vernacular(self, ws: int) -> bool:
        return ws in self._vernacular

    def make_text(self, text: str, ws: Optional[int] = None) -> RichText:
        return RichText(text, self._default if ws is None else ws)
