# lexmorph/core/domain/morphology/markers.py
"""
morphology/markers.py

Marker sets and marker identification.

A marker is a short string written before (prefix marker) or after (postfix
marker) a morph form to indicate its morph type, e.g. the "-" in "-ing" or
"un-". Markers must not occur inside the text of a morph except at its
boundaries.

Identification rules:
  - a prefix marker matches only at offset 0; when several do, the first in
    table order wins;
  - a postfix marker matches only as a proper suffix (it may not consume the
    whole form); the longest matching postfix marker wins, and among equally
    long ones the first in table order wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from lexmorph.core.domain.models import MorphType


@dataclass(frozen=True, slots=True)
class MarkerSet:
    """Distinct non-empty markers of a morph-type table, in first-seen order."""

    prefix_markers: Tuple[str, ...] = ()
    postfix_markers: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AffixMarkers:
    """The markers identified on one form (either may be absent)."""

    prefix: Optional[str] = None
    postfix: Optional[str] = None

    @property
    def is_unmarked(self) -> bool:
        return self.prefix is None and self.postfix is None


def _distinct(markers: Iterable[Optional[str]]) -> Tuple[str, ...]:
    seen: List[str] = []
    for marker in markers:
        if marker and marker not in seen:
            seen.append(marker)
    return tuple(seen)


def build_marker_set(morph_types: Iterable[MorphType]) -> MarkerSet:
    """Derive the prefix and postfix marker lists from a morph-type table."""
    types = list(morph_types)
    return MarkerSet(
        prefix_markers=_distinct(mt.prefix for mt in types),
        postfix_markers=_distinct(mt.postfix for mt in types),
    )


def match_prefix_marker(form: str, prefix_markers: Iterable[str]) -> Optional[str]:
    for marker in prefix_markers:
        if form.startswith(marker):
            return marker
    return None


def match_postfix_marker(form: str, postfix_markers: Iterable[str]) -> Optional[str]:
    best: Optional[str] = None
    for marker in postfix_markers:
        # An empty residual form is invalid.
        if len(marker) >= len(form) or not form.endswith(marker):
            continue
        if best is None or len(marker) > len(best):
            best = marker
    return best


def identify_affix_markers(form: str, marker_set: MarkerSet) -> AffixMarkers:
    """
    Find the prefix and postfix markers present on `form`.

    Absence of markers is the common case and is not an error.
    """
    return AffixMarkers(
        prefix=match_prefix_marker(form, marker_set.prefix_markers),
        postfix=match_postfix_marker(form, marker_set.postfix_markers),
    )


__all__ = [
    "MarkerSet",
    "AffixMarkers",
    "build_marker_set",
    "match_prefix_marker",
    "match_postfix_marker",
    "identify_affix_markers",
]
