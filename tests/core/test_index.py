# tests\core\test_index.py
from lexmorph.core.domain.models import RichText, StemAllomorph
from lexmorph.core.domain.morphology import MorphIndex

VERN = 1
VERN2 = 3


class TestMorphIndex:
    def test_monomorphemic_index_contents(self, lexicon):
        """
        Expected: live unbound stems in every writing system; no affixes,
        bound stems or forms of deleted entries.
        """
        index = MorphIndex.build_monomorphemic(lexicon.all_forms())

        assert sorted(index.keys()) == [
            (VERN, "lo"),
            (VERN, "ran"),
            (VERN, "run"),
            (VERN, "walk"),
            (VERN2, "wolk"),
        ]
        assert index.lookup(RichText("run", VERN)).owner.is_valid
        assert RichText("ing", VERN) not in index
        assert RichText("ceive", VERN) not in index

    def test_all_alternatives_point_to_the_same_form(self, lexicon):
        index = MorphIndex.build_monomorphemic(lexicon.all_forms())
        assert index.lookup(RichText("walk", VERN)) is index.lookup(RichText("wolk", VERN2))

    def test_last_writer_wins(self):
        first = StemAllomorph(form={VERN: "run"})
        second = StemAllomorph(form={VERN: "run"})

        index = MorphIndex.build([first, second])

        assert len(index) == 1
        assert index.lookup(RichText("run", VERN)) is second

    def test_resolve_fills_only_matches(self, lexicon):
        """
        Scenario: a batch of queries, one matching and one not.
        Expected: the matching slot is filled, the other keeps its value.
        """
        index = MorphIndex.build_monomorphemic(lexicon.all_forms())
        sentinel = object()
        collector = {RichText("run", VERN): None, RichText("xyz", VERN): sentinel}

        hits = index.resolve(collector)

        assert hits == 1
        assert collector[RichText("run", VERN)].form[VERN] == "run"
        assert collector[RichText("xyz", VERN)] is sentinel
        assert len(collector) == 2

    def test_resolve_skips_forms_orphaned_after_build(self, lexicon):
        index = MorphIndex.build_monomorphemic(lexicon.all_forms())
        run = RichText("run", VERN)
        index.lookup(run).owner.delete()
        sentinel = object()
        collector = {run: sentinel, RichText("walk", VERN): None}

        hits = index.resolve(collector)

        assert hits == 1
        assert collector[run] is sentinel
        assert collector[RichText("walk", VERN)] is not None

    def test_lookup_never_inserts(self):
        index = MorphIndex.build([])
        assert index.lookup(RichText("run", VERN)) is None
        assert index.resolve({RichText("run", VERN): None}) == 0
        assert len(index) == 0
