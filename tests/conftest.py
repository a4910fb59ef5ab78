# tests/conftest.py
import pytest

from lexmorph.adapters.persistence.lexicon_repository import InMemoryLexiconRepository
from lexmorph.adapters.persistence.morph_types import InMemoryMorphTypeRepository, load_morph_type_repository
from lexmorph.adapters.writing_systems import StaticWritingSystemService
from lexmorph.core.domain.models import LexEntry, MorphType, StemAllomorph, AffixAllomorph
from lexmorph.core.domain.morphology import MorphComponentBuilder, MorphTypeClassifier
from lexmorph.shared.container import Container

VERN = 1
VERN2 = 3
ANAL = 2


@pytest.fixture(scope="session")
def standard_types() -> InMemoryMorphTypeRepository:
    """The bundled standard morph-type table."""
    return load_morph_type_repository()


@pytest.fixture
def small_types() -> InMemoryMorphTypeRepository:
    """
    A four-type table: suffix (-x), prefix (x-), bound stem (*x) and stem.
    """
    return InMemoryMorphTypeRepository([
        MorphType(id="prefix", name="prefix", postfix="-", is_affix_type=True, is_prefixish=True),
        MorphType(id="suffix", name="suffix", prefix="-", is_affix_type=True, is_suffixish=True),
        MorphType(id="bound_stem", name="bound stem", prefix="*"),
        MorphType(id="stem", name="stem"),
    ])


@pytest.fixture
def classifier(standard_types) -> MorphTypeClassifier:
    return MorphTypeClassifier(standard_types)


@pytest.fixture
def writing_systems() -> StaticWritingSystemService:
    return StaticWritingSystemService(vernacular=[VERN, VERN2], analysis=[ANAL])


@pytest.fixture
def component_builder(classifier, writing_systems) -> MorphComponentBuilder:
    return MorphComponentBuilder(classifier, writing_systems)


def make_entry(standard_types, *forms, valid=True):
    """
    Build an entry from (type id, {ws: text}) pairs; the first becomes the
    lexeme form.
    """
    entry = LexEntry(is_valid=valid)
    for type_id, texts in forms:
        morph_type = standard_types.get(type_id)
        cls = AffixAllomorph if morph_type.is_affix_type else StemAllomorph
        entry.add_allomorph(cls(form=dict(texts), morph_type=morph_type))
    return entry


@pytest.fixture
def entry_factory(standard_types):
    def _make(*forms, valid=True):
        return make_entry(standard_types, *forms, valid=valid)
    return _make


@pytest.fixture
def lexicon(standard_types) -> InMemoryLexiconRepository:
    """
    A small lexicon:
      run (stem) with alternate "ran"; walk (root, two writing systems);
      -ing (suffix); *ceive (bound stem); =lo (enclitic);
      a deleted entry "run" (stem).
    """
    repo = InMemoryLexiconRepository()
    repo.add_entry(make_entry(standard_types, ("stem", {VERN: "run"}), ("stem", {VERN: "ran"})))
    repo.add_entry(make_entry(standard_types, ("root", {VERN: "walk", VERN2: "wolk"})))
    repo.add_entry(make_entry(standard_types, ("suffix", {VERN: "ing"})))
    repo.add_entry(make_entry(standard_types, ("bound_stem", {VERN: "ceive"})))
    repo.add_entry(make_entry(standard_types, ("enclitic", {VERN: "lo"})))
    repo.add_entry(make_entry(standard_types, ("stem", {VERN: "run"}), valid=False))
    return repo


@pytest.fixture(scope="function")
def container(standard_types, writing_systems, lexicon):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides infrastructure providers with the fixtures defined above.
    """
    container = Container()

    container.morph_type_repository.override(standard_types)
    container.writing_systems.override(writing_systems)
    container.lexicon_repository.override(lexicon)

    yield container

    container.reset_override()
    container.reset_singletons()
