# lexmorph/shared/container.py
from dependency_injector import containers, providers

from lexmorph.shared.config import settings
from lexmorph.adapters.persistence.lexicon_repository import InMemoryLexiconRepository
from lexmorph.adapters.persistence.morph_types.loader import load_morph_type_repository
from lexmorph.adapters.writing_systems import StaticWritingSystemService

from lexmorph.core.domain.morphology.classifier import MorphTypeClassifier
from lexmorph.core.domain.morphology.components import MorphComponentBuilder
from lexmorph.core.use_cases.make_morph import MakeMorph
from lexmorph.core.use_cases.match_morphs import MatchMorphs


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the library.
    """

    # 1. Configuration
    # Wrapped in a provider so tests can override it.
    config = providers.Object(settings)

    # 2. Gateways (Infrastructure Adapters)

    # Morph-type table (Singleton: loaded once from the configured file)
    morph_type_repository = providers.Singleton(
        load_morph_type_repository,
        config.provided.MORPH_TYPES_FILE,
    )

    writing_systems = providers.Singleton(
        StaticWritingSystemService.from_settings,
        config,
    )

    lexicon_repository = providers.Singleton(
        InMemoryLexiconRepository
    )

    # 3. Domain Services

    # Singleton: memoises the marker set per table version
    classifier = providers.Singleton(
        MorphTypeClassifier,
        morph_types=morph_type_repository,
    )

    component_builder = providers.Factory(
        MorphComponentBuilder,
        classifier=classifier,
        writing_systems=writing_systems,
    )

    # 4. Use Cases

    make_morph_use_case = providers.Factory(
        MakeMorph,
        classifier=classifier,
        writing_systems=writing_systems,
        repository=lexicon_repository,
    )

    # Singleton: holds the morph index cache
    match_morphs_use_case = providers.Singleton(
        MatchMorphs,
        repository=lexicon_repository,
        cache_enabled=config.provided.MORPH_INDEX_CACHE_ENABLED,
    )


# Instantiate the container for global access (e.g. by the CLI)
container = Container()
