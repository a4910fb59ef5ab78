# lexmorph/core/domain/morphology/matching.py
"""
morphology/matching.py

Filtering of stored morph forms against a query form.

These are linear scans, suitable for targeted lookups and small candidate
sets. Bulk lookups should go through `morphology.index.MorphIndex`.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from lexmorph.core.domain.models import (
    BOUND_KINDS,
    CLITIC_KINDS,
    FormClass,
    LexEntry,
    MorphForm,
    MorphType,
    RichText,
)


def has_live_owner(form: MorphForm) -> bool:
    """True if the form is owned by a lexical entry that has not been deleted."""
    owner = form.owner
    return isinstance(owner, LexEntry) and owner.is_valid


def _marker_matches(declared: Optional[str], wanted: str, morph_type: MorphType) -> bool:
    if declared == (wanted or None):
        return True
    # A proclitic or enclitic may stand alone, without its declared marker.
    return not wanted and morph_type.id in CLITIC_KINDS


def is_monomorphemic(form: MorphForm) -> bool:
    """A live stem allomorph whose morph type is not bound."""
    return (
        form.form_class is FormClass.STEM
        and has_live_owner(form)
        and form.morph_type is not None
        and form.morph_type.id not in BOUND_KINDS
    )


def get_matching_morphs(
    forms: Iterable[MorphForm],
    prefix_marker: Optional[str],
    morph_form: RichText,
    postfix_marker: Optional[str],
    form_class: Optional[FormClass] = None,
) -> Iterator[MorphForm]:
    """
    Yield the forms whose text and declared markers match the query.

    A form matches when its owner is a live entry, its text in the query's
    writing system equals the query text, and its morph type declares the
    query markers. An empty (or None) query marker also accepts types with
    no marker, and proclitic/enclitic types whatever they declare.
    """
    prefix_marker = prefix_marker or ""
    postfix_marker = postfix_marker or ""
    for mf in forms:
        if form_class is not None and mf.form_class is not form_class:
            continue
        if not has_live_owner(mf):
            continue
        if mf.get_form(morph_form.ws) != morph_form:
            continue
        mt = mf.morph_type
        if mt is None:
            continue
        if _marker_matches(mt.prefix, prefix_marker, mt) and _marker_matches(mt.postfix, postfix_marker, mt):
            yield mf


def get_matching_monomorphemic_morphs(forms: Iterable[MorphForm], morph_form: RichText) -> Iterator[MorphForm]:
    """Unmarked stem allomorphs matching `morph_form`, excluding bound roots and stems."""
    for mf in get_matching_morphs(forms, "", morph_form, "", FormClass.STEM):
        if mf.morph_type.id not in BOUND_KINDS:
            yield mf


def find_matching_allomorph(entry: LexEntry, morph_form: RichText) -> Optional[MorphForm]:
    """
    Find the entry's form with the given text, looking at the lexeme form
    first and then the alternate forms in order.
    """
    for allomorph in entry.allomorphs():
        if allomorph.form.get(morph_form.ws) == morph_form.text:
            return allomorph
    return None


__all__ = [
    "has_live_owner",
    "is_monomorphemic",
    "get_matching_morphs",
    "get_matching_monomorphemic_morphs",
    "find_matching_allomorph",
]
