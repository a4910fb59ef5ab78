# lexmorph/core/use_cases/make_morph.py
from typing import Optional, Union

import structlog

from lexmorph.core.domain.models import LexEntry, MorphForm, RichText, create_form
from lexmorph.core.domain.morphology.classifier import MorphTypeClassifier
from lexmorph.core.ports.form_repository import IFormRepository
from lexmorph.core.ports.writing_systems import IWritingSystemService
from lexmorph.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class MakeMorph:
    """
    Use Case: Adds a new morph form, given as marked text, to a lexical entry.

    Responsibilities:
    1. Classify the marked text (morph type + storage class).
    2. Create the storage object of that class.
    3. Attach it to the entry (lexeme form slot first, then alternate forms).
    4. Record the morph type and the unmarked text under the input's
       writing system.
    """

    def __init__(
        self,
        classifier: MorphTypeClassifier,
        writing_systems: IWritingSystemService,
        repository: Optional[IFormRepository] = None,
    ):
        self.classifier = classifier
        self.writing_systems = writing_systems
        self.repository = repository

    def execute(self, owning_entry: LexEntry, full_form: Union[str, RichText]) -> MorphForm:
        """
        Args:
            owning_entry: the entry that will own the new form.
            full_form: marked text; plain strings use the default vernacular
                writing system.

        Returns:
            The new StemAllomorph or AffixAllomorph.

        Raises:
            InvalidFormError, UnresolvableMarkingError: from classification.
        """
        if isinstance(full_form, str):
            full_form = self.writing_systems.make_text(full_form)

        with tracer.start_as_current_span("use_case.make_morph") as span:
            span.set_attribute("lexmorph.entry_id", owning_entry.id)
            span.set_attribute("lexmorph.ws", full_form.ws)

            result = self.classifier.classify(full_form.text)

            allomorph = create_form(result.form_class)
            owning_entry.add_allomorph(allomorph)
            allomorph.morph_type = result.morph_type
            allomorph.set_form(full_form.ws, result.form)

            if self.repository is not None:
                self.repository.touch()

            span.set_attribute("lexmorph.morph_type", result.morph_type.id)
            logger.info(
                "morph_created",
                entry_id=owning_entry.id,
                morph_type=result.morph_type.id,
                form_class=result.form_class.value,
                form=result.form,
            )
            return allomorph

    def ensure_no_markers(self, form: Optional[str]) -> str:
        """Strip type markers from `form` using the current table."""
        return self.classifier.strip_markers(form)
