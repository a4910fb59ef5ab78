# tests\adapters\test_repositories.py
import pytest

from lexmorph.adapters.persistence.lexicon_repository import InMemoryLexiconRepository
from lexmorph.adapters.persistence.morph_types import InMemoryMorphTypeRepository
from lexmorph.core.domain.exceptions import MorphTypeNotFoundError, MorphTypeTableError
from lexmorph.core.domain.models import LexEntry, MorphType, MorphTypeKind


class TestMorphTypeRepository:
    def test_lookup_by_id_and_kind(self, standard_types):
        assert standard_types.get("suffix").prefix == "-"
        assert standard_types.get(MorphTypeKind.PREFIX).postfix == "-"
        assert standard_types.find(MorphTypeKind.INFIX).id == "infix"
        assert MorphTypeKind.PHRASE in standard_types

    def test_missing_type(self, standard_types):
        assert standard_types.find("nonexistent") is None
        with pytest.raises(MorphTypeNotFoundError) as exc_info:
            standard_types.get("nonexistent")
        assert exc_info.value.type_id == "nonexistent"

    def test_iteration_follows_table_order(self, small_types):
        assert [mt.id for mt in small_types] == ["prefix", "suffix", "bound_stem", "stem"]
        assert len(small_types) == 4

    def test_replace_bumps_version(self, small_types):
        before = small_types.version

        small_types.replace([MorphType(id="stem")])

        assert small_types.version == before + 1
        assert len(small_types) == 1
        assert small_types.find("suffix") is None

    def test_failed_replace_keeps_table(self, small_types):
        before = small_types.version
        with pytest.raises(MorphTypeTableError):
            small_types.replace([MorphType(id="stem"), MorphType(id="stem")])
        assert small_types.version == before
        assert len(small_types) == 4

    def test_empty_table(self):
        repo = InMemoryMorphTypeRepository()
        assert len(repo) == 0
        assert repo.version == 1


class TestLexiconRepository:
    def test_add_and_get(self, entry_factory):
        repo = InMemoryLexiconRepository()
        entry = repo.add_entry(entry_factory(("stem", {1: "run"})))

        assert repo.get_entry(entry.id) is entry
        assert repo.get_entry("missing") is None
        assert len(repo) == 1
        assert repo.version == 1

    def test_delete_keeps_forms_as_orphans(self, lexicon):
        """
        Scenario: An entry is deleted.
        Expected: It is flagged invalid but its forms are still enumerated.
        """
        entry = lexicon.entries()[0]
        count = len(list(lexicon.all_forms()))
        before = lexicon.version

        lexicon.delete_entry(entry)

        assert not entry.is_valid
        assert len(list(lexicon.all_forms())) == count
        assert lexicon.version == before + 1

    def test_touch(self):
        repo = InMemoryLexiconRepository([LexEntry()])
        repo.touch()
        assert repo.version == 1
        assert len(repo) == 1
