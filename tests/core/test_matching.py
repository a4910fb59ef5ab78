# tests\core\test_matching.py
from lexmorph.core.domain.models import FormClass, LexEntry, RichText, StemAllomorph
from lexmorph.core.domain.morphology.matching import (
    find_matching_allomorph,
    get_matching_monomorphemic_morphs,
    get_matching_morphs,
    has_live_owner,
    is_monomorphemic,
)

VERN = 1
VERN2 = 3


def _texts(forms, ws=VERN):
    return sorted(mf.form[ws] for mf in forms)


class TestGetMatchingMorphs:
    def test_marked_suffix(self, lexicon):
        found = list(get_matching_morphs(lexicon.all_forms(), "-", RichText("ing", VERN), ""))
        assert len(found) == 1
        assert found[0].morph_type.id == "suffix"

    def test_wrong_markers_do_not_match(self, lexicon):
        assert list(get_matching_morphs(lexicon.all_forms(), "", RichText("ing", VERN), "-")) == []
        assert list(get_matching_morphs(lexicon.all_forms(), "", RichText("ing", VERN), "")) == []

    def test_deleted_entries_are_skipped(self, lexicon):
        """
        Scenario: "run" exists in a live entry and in a deleted one.
        Expected: Only the live form is returned.
        """
        found = list(get_matching_morphs(lexicon.all_forms(), None, RichText("run", VERN), None))
        assert len(found) == 1
        assert found[0].owner.is_valid

    def test_clitic_matches_without_its_marker(self, lexicon):
        """An enclitic may be queried bare as well as with its declared marker."""
        bare = list(get_matching_morphs(lexicon.all_forms(), "", RichText("lo", VERN), ""))
        marked = list(get_matching_morphs(lexicon.all_forms(), "=", RichText("lo", VERN), ""))
        assert len(bare) == 1 and bare[0].morph_type.id == "enclitic"
        assert marked == bare

    def test_writing_system_must_match(self, lexicon):
        assert list(get_matching_morphs(lexicon.all_forms(), "", RichText("walk", VERN2), "")) == []
        found = list(get_matching_morphs(lexicon.all_forms(), "", RichText("wolk", VERN2), ""))
        assert _texts(found) == ["walk"]

    def test_form_class_filter(self, lexicon):
        query = RichText("ing", VERN)
        assert list(get_matching_morphs(lexicon.all_forms(), "-", query, "", FormClass.STEM)) == []
        assert len(list(get_matching_morphs(lexicon.all_forms(), "-", query, "", FormClass.AFFIX))) == 1

    def test_orphans_are_skipped(self, standard_types):
        orphan = StemAllomorph(form={VERN: "run"}, morph_type=standard_types.get("stem"))
        assert not has_live_owner(orphan)
        assert list(get_matching_morphs([orphan], "", RichText("run", VERN), "")) == []


class TestMonomorphemic:
    def test_stems_and_roots(self, lexicon):
        assert len(list(get_matching_monomorphemic_morphs(lexicon.all_forms(), RichText("walk", VERN)))) == 1
        assert len(list(get_matching_monomorphemic_morphs(lexicon.all_forms(), RichText("ran", VERN)))) == 1

    def test_bound_stems_are_excluded(self, lexicon):
        query = RichText("ceive", VERN)
        assert list(get_matching_monomorphemic_morphs(lexicon.all_forms(), query)) == []
        assert len(list(get_matching_morphs(lexicon.all_forms(), "*", query, ""))) == 1

    def test_affixes_are_excluded(self, lexicon):
        assert list(get_matching_monomorphemic_morphs(lexicon.all_forms(), RichText("ing", VERN))) == []

    def test_is_monomorphemic(self, lexicon):
        flags = {mf.form.get(VERN): is_monomorphemic(mf) for mf in lexicon.all_forms() if mf.owner.is_valid}
        assert flags == {"run": True, "ran": True, "walk": True, "ing": False, "ceive": False, "lo": True}


class TestFindMatchingAllomorph:
    def test_lexeme_form_then_alternates(self, entry_factory):
        entry = entry_factory(("stem", {VERN: "run"}), ("stem", {VERN: "ran"}))

        assert find_matching_allomorph(entry, RichText("run", VERN)) is entry.lexeme_form
        assert find_matching_allomorph(entry, RichText("ran", VERN)) is entry.alternate_forms[0]

    def test_no_match(self, entry_factory):
        entry = entry_factory(("stem", {VERN: "run"}))
        assert find_matching_allomorph(entry, RichText("rin", VERN)) is None
        assert find_matching_allomorph(entry, RichText("run", VERN2)) is None
        assert find_matching_allomorph(LexEntry(), RichText("run", VERN)) is None
