# lexmorph/core/domain/morphology/components.py
"""Breakdown of marked forms into the components needed to create entries."""

from __future__ import annotations

from lexmorph.core.domain.models import LexEntryComponents, MorphComponents, MorphTypeKind, RichText
from lexmorph.core.domain.morphology.classifier import MorphTypeClassifier
from lexmorph.core.ports.writing_systems import IWritingSystemService


class MorphComponentBuilder:
    """
    Combines classification and stripping into a `MorphComponents` record.

    This is the only place that consults writing-system membership: forms in
    a non-vernacular (analysis) writing system, and empty forms, are not
    parsed for markers at all.
    """

    def __init__(self, classifier: MorphTypeClassifier, writing_systems: IWritingSystemService):
        self.classifier = classifier
        self.writing_systems = writing_systems

    def build_morph_components(
        self,
        form_with_markers: RichText,
        default_morph_type: str = MorphTypeKind.STEM.value,
    ) -> MorphComponents:
        """
        Break `form_with_markers` into morph type, prefix, postfix and form.

        Args:
            form_with_markers: the text as typed, markers included.
            default_morph_type: id of the type returned for empty or
                non-vernacular input.

        Raises:
            InvalidFormError: the vernacular form is whitespace only.
            UnresolvableMarkingError: the marking matches no morph type.
        """
        if len(form_with_markers) == 0 or not self.writing_systems.is_vernacular(form_with_markers.ws):
            return MorphComponents(morph_type=self.classifier.morph_types.get(default_morph_type))

        result = self.classifier.classify(form_with_markers.text)
        return MorphComponents(
            morph_type=result.morph_type,
            prefix=result.prefix,
            postfix=result.postfix,
            form=RichText(result.form, form_with_markers.ws),
        )

    def build_entry_components(self, form_with_markers: RichText) -> LexEntryComponents:
        """Components for a new entry; unrecognised input defaults to a stem."""
        components = self.build_morph_components(form_with_markers, MorphTypeKind.STEM.value)
        entry = LexEntryComponents(morph_type=components.morph_type)
        if components.form is not None:
            entry.lexeme_form_alternatives.append(components.form)
        return entry


__all__ = ["MorphComponentBuilder"]
