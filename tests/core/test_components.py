# tests\core\test_components.py
import pytest

from lexmorph.core.domain.exceptions import InvalidFormError, UnresolvableMarkingError
from lexmorph.core.domain.models import RichText
from lexmorph.core.domain.morphology import MorphComponentBuilder, MorphTypeClassifier

VERN = 1
ANAL = 2


class TestBuildMorphComponents:
    def test_vernacular_form_is_classified(self, component_builder):
        """
        Scenario: A suffix typed in a vernacular writing system.
        Expected: Type, markers and the unmarked form in the same writing system.
        """
        components = component_builder.build_morph_components(RichText("-ing", VERN))

        assert components.morph_type.id == "suffix"
        assert components.prefix == "-"
        assert components.postfix is None
        assert components.form == RichText("ing", VERN)

    def test_analysis_form_is_not_parsed(self, component_builder):
        components = component_builder.build_morph_components(RichText("-ing", ANAL))

        assert components.morph_type.id == "stem"
        assert components.prefix is None
        assert components.postfix is None
        assert components.form is None

    def test_empty_form_gets_the_default_type(self, component_builder):
        components = component_builder.build_morph_components(RichText("", VERN), "root")
        assert components.morph_type.id == "root"
        assert components.form is None

    def test_whitespace_form_is_invalid(self, component_builder):
        with pytest.raises(InvalidFormError):
            component_builder.build_morph_components(RichText("   ", VERN))

    def test_unresolvable_marking_propagates(self, small_types, writing_systems):
        builder = MorphComponentBuilder(MorphTypeClassifier(small_types), writing_systems)
        with pytest.raises(UnresolvableMarkingError):
            builder.build_morph_components(RichText("*x-", VERN))


class TestBuildEntryComponents:
    def test_prefix_entry(self, component_builder):
        entry = component_builder.build_entry_components(RichText("un-", VERN))
        assert entry.morph_type.id == "prefix"
        assert entry.lexeme_form_alternatives == [RichText("un", VERN)]

    def test_phrase_entry(self, component_builder):
        entry = component_builder.build_entry_components(RichText("kick the bucket", VERN))
        assert entry.morph_type.id == "phrase"
        assert entry.lexeme_form_alternatives == [RichText("kick the bucket", VERN)]

    def test_analysis_input_defaults_to_stem(self, component_builder):
        entry = component_builder.build_entry_components(RichText("to run", ANAL))
        assert entry.morph_type.id == "stem"
        assert entry.lexeme_form_alternatives == []
