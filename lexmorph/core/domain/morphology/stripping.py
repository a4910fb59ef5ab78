# lexmorph/core/domain/morphology/stripping.py
"""Removal of identified markers from a form."""

from __future__ import annotations

from typing import Optional

from lexmorph.core.domain.morphology.markers import AffixMarkers, MarkerSet, identify_affix_markers


def remove_markers(form: str, markers: AffixMarkers) -> str:
    """
    Cut the given markers off the front and back of an already trimmed form.

    Nothing else is altered. An empty result is returned as-is.
    """
    stripped = form
    if markers.prefix:
        stripped = stripped[len(markers.prefix):]
    if markers.postfix:
        stripped = stripped[: max(len(stripped) - len(markers.postfix), 0)]
    return stripped


def strip_affix_markers(full_form: Optional[str], marker_set: MarkerSet) -> str:
    """Trim `full_form`, identify its markers and return it without them."""
    if not full_form:
        return ""
    trimmed = full_form.strip()
    return remove_markers(trimmed, identify_affix_markers(trimmed, marker_set))


__all__ = ["remove_markers", "strip_affix_markers"]
