# lexmorph/core/domain/morphology/classifier.py
"""
morphology/classifier.py

Morph-type classification of marked forms.

Several morph types share the same orthographic marking, so the table
contains unavoidable ambiguities:

    prefix-          prefix / prefixing interfix
    -suffix          suffix / suffixing interfix
    -infix-          infix / infixing interfix
    *bound           bound stem / bound root
    stem             stem / root / particle / circumfix / clitic /
                     phrase / discontiguous phrase

Each ambiguous group resolves to a single representative (the last column of
AMBIGUITY_RESOLUTION), so the resulting storage class is predictable.
After that, an unmarked form containing a space is a phrase rather than a
stem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

import structlog

from lexmorph.core.domain.exceptions import InvalidFormError, UnresolvableMarkingError
from lexmorph.core.domain.models import FormClass, MorphType, MorphTypeKind
from lexmorph.core.domain.morphology.markers import (
    AffixMarkers,
    MarkerSet,
    build_marker_set,
    identify_affix_markers,
)
from lexmorph.core.domain.morphology.stripping import remove_markers, strip_affix_markers
from lexmorph.core.ports.morph_type_repository import IMorphTypeRepository
from lexmorph.shared.cache import VersionedCache

logger = structlog.get_logger()

K = MorphTypeKind

# declared type id -> resolved type id
AMBIGUITY_RESOLUTION: Mapping[str, str] = {
    K.PREFIXING_INTERFIX.value: K.PREFIX.value,
    K.SUFFIXING_INTERFIX.value: K.SUFFIX.value,
    K.INFIXING_INTERFIX.value: K.INFIX.value,
    K.BOUND_ROOT.value: K.BOUND_STEM.value,
    K.PARTICLE.value: K.STEM.value,
    K.CIRCUMFIX.value: K.STEM.value,
    K.ROOT.value: K.STEM.value,
    K.DISCONTIGUOUS_PHRASE.value: K.STEM.value,
    K.PHRASE.value: K.STEM.value,
    K.CLITIC.value: K.STEM.value,
}


@dataclass(frozen=True, slots=True)
class MorphClassification:
    """Outcome of classifying one marked form."""

    morph_type: MorphType
    form_class: FormClass
    markers: AffixMarkers
    form: str

    @property
    def prefix(self) -> Optional[str]:
        return self.markers.prefix

    @property
    def postfix(self) -> Optional[str]:
        return self.markers.postfix


@dataclass(frozen=True, slots=True)
class MajorAffixTypes:
    prefix: Optional[MorphType] = None
    suffix: Optional[MorphType] = None
    infix: Optional[MorphType] = None


def form_class_for(morph_type: MorphType) -> FormClass:
    return FormClass.AFFIX if morph_type.is_affix_type else FormClass.STEM


class MorphTypeClassifier:
    """
    Classifies marked forms against a morph-type table.

    The marker set is derived from the table and memoised per table version.
    Instances hold no per-call state and may be shared between threads.
    """

    def __init__(self, morph_types: IMorphTypeRepository, *, cache_markers: bool = True):
        self.morph_types = morph_types
        self._markers: VersionedCache[MarkerSet] = VersionedCache(
            lambda: build_marker_set(self.morph_types.all_types()),
            lambda: self.morph_types.version,
            name="marker_set",
            enabled=cache_markers,
        )

    # ------------------------------------------------------------------
    # Markers
    # ------------------------------------------------------------------

    @property
    def marker_set(self) -> MarkerSet:
        return self._markers.get()

    @property
    def prefix_markers(self) -> Tuple[str, ...]:
        return self.marker_set.prefix_markers

    @property
    def postfix_markers(self) -> Tuple[str, ...]:
        return self.marker_set.postfix_markers

    def identify_markers(self, form: str) -> AffixMarkers:
        return identify_affix_markers(form, self.marker_set)

    def strip_markers(self, full_form: Optional[str]) -> str:
        """Return `full_form` trimmed and without its type markers."""
        return strip_affix_markers(full_form, self.marker_set)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def resolve(self, markers: AffixMarkers, form: str) -> MorphType:
        """
        Select the morph type declaring exactly `markers`, then apply the
        ambiguity resolution and the phrase override.

        Raises:
            UnresolvableMarkingError: no type declares this marker pair.
            MorphTypeNotFoundError: a resolution target is missing from the table.
        """
        declared = next(
            (mt for mt in self.morph_types.all_types()
             if mt.prefix == markers.prefix and mt.postfix == markers.postfix),
            None,
        )
        if declared is None:
            raise UnresolvableMarkingError(form, markers.prefix, markers.postfix)

        target = AMBIGUITY_RESOLUTION.get(declared.id)
        resolved = declared if target is None else self.morph_types.get(target)

        if resolved.is_kind(K.STEM) and " " in form:
            resolved = self.morph_types.get(K.PHRASE.value)

        return resolved

    def classify(self, full_form: str) -> MorphClassification:
        """
        Classify a marked form.

        The form is trimmed once; markers are identified on the trimmed text,
        the morph type is resolved and the markers are removed.

        Raises:
            InvalidFormError: the form is empty after trimming.
            UnresolvableMarkingError: the marking matches no morph type.
        """
        form = (full_form or "").strip()
        if not form:
            raise InvalidFormError(full_form or "")

        markers = self.identify_markers(form)
        morph_type = self.resolve(markers, form)
        result = MorphClassification(
            morph_type=morph_type,
            form_class=form_class_for(morph_type),
            markers=markers,
            form=remove_markers(form, markers),
        )
        logger.debug(
            "morph_type_resolved",
            form=form,
            prefix=markers.prefix,
            postfix=markers.postfix,
            morph_type=morph_type.id,
        )
        return result

    def find_morph_type(self, full_form: str) -> Tuple[MorphType, FormClass, str]:
        """Shorthand for `classify` returning (morph type, form class, stripped form)."""
        result = self.classify(full_form)
        return result.morph_type, result.form_class, result.form

    # ------------------------------------------------------------------
    # Table helpers
    # ------------------------------------------------------------------

    def type_if_matches_prefix(self, form: str) -> Tuple[Optional[MorphType], str]:
        """
        If `form` is exactly a prefix marker, return the type it denotes.

        A type with that prefix marker and no postfix marker is returned at
        once (bound root is only considered after all others, so that bound
        stem wins). Failing that, a type with both markers is returned with
        the adjusted form `prefix + postfix`, e.g. "~" becomes "~~" for a
        suprafix.

        Returns:
            (morph type or None, adjusted form)
        """
        if not form:
            return None, form

        possible: Optional[MorphType] = None
        bound_root: Optional[MorphType] = None
        for mt in self.morph_types.all_types():
            if mt.is_kind(K.BOUND_ROOT):
                bound_root = mt
            elif mt.prefix == form:
                if mt.postfix is None:
                    return mt, form
                possible = mt

        if bound_root is not None and bound_root.prefix == form and bound_root.postfix is None:
            return bound_root, form

        if possible is not None:
            return possible, f"{possible.prefix}{possible.postfix}"
        return None, form

    def major_affix_types(self) -> MajorAffixTypes:
        """Return the prefix, suffix and infix types of the table (any may be absent)."""
        return MajorAffixTypes(
            prefix=self.morph_types.find(K.PREFIX.value),
            suffix=self.morph_types.find(K.SUFFIX.value),
            infix=self.morph_types.find(K.INFIX.value),
        )

    def is_affix_type(self, type_id: str) -> bool:
        return self.morph_types.get(type_id).is_affix_type

    def is_prefixish_type(self, type_id: str) -> bool:
        return self.morph_types.get(type_id).is_prefixish

    def is_suffixish_type(self, type_id: str) -> bool:
        return self.morph_types.get(type_id).is_suffixish


__all__ = [
    "AMBIGUITY_RESOLUTION",
    "MorphClassification",
    "MajorAffixTypes",
    "MorphTypeClassifier",
    "form_class_for",
]
