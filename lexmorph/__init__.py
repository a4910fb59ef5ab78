"""
lexmorph - morph-type classification and morph-form lookup for lexical databases.

This package re-exports the most common APIs so callers can do:

    from lexmorph import MorphTypeClassifier, load_morph_type_repository

    classifier = MorphTypeClassifier(load_morph_type_repository())
    result = classifier.classify("-ing")
    result.morph_type.id, result.form   # ('suffix', 'ing')

Layout
======
- core/domain: entities, exceptions and the morphology algorithms
- core/ports: interfaces for the morph-type table, form store, writing systems
- core/use_cases: MakeMorph, MatchMorphs
- adapters: in-memory and JSON-backed implementations of the ports
- shared: settings, logging, tracing, caching, dependency injection
"""

from lexmorph.adapters.persistence.lexicon_repository import InMemoryLexiconRepository
from lexmorph.adapters.persistence.morph_types import (
    InMemoryMorphTypeRepository,
    load_morph_type_repository,
    load_morph_types,
)
from lexmorph.adapters.writing_systems import StaticWritingSystemService
from lexmorph.core.domain.exceptions import (
    DomainError,
    InvalidFormError,
    MorphTypeNotFoundError,
    MorphTypeTableError,
    UnresolvableMarkingError,
)
from lexmorph.core.domain.models import (
    AffixAllomorph,
    FormClass,
    LexEntry,
    LexEntryComponents,
    MorphComponents,
    MorphForm,
    MorphType,
    MorphTypeKind,
    RichText,
    StemAllomorph,
)
from lexmorph.core.domain.morphology import (
    AffixMarkers,
    MarkerSet,
    MorphClassification,
    MorphComponentBuilder,
    MorphIndex,
    MorphTypeClassifier,
)
from lexmorph.core.use_cases import MakeMorph, MatchMorphs

__version__ = "2.0.0"

__all__ = [
    # Models
    "MorphType",
    "MorphTypeKind",
    "FormClass",
    "RichText",
    "MorphForm",
    "StemAllomorph",
    "AffixAllomorph",
    "LexEntry",
    "MorphComponents",
    "LexEntryComponents",
    # Morphology
    "AffixMarkers",
    "MarkerSet",
    "MorphClassification",
    "MorphTypeClassifier",
    "MorphComponentBuilder",
    "MorphIndex",
    # Use cases
    "MakeMorph",
    "MatchMorphs",
    # Adapters
    "InMemoryMorphTypeRepository",
    "InMemoryLexiconRepository",
    "StaticWritingSystemService",
    "load_morph_types",
    "load_morph_type_repository",
    # Errors
    "DomainError",
    "InvalidFormError",
    "UnresolvableMarkingError",
    "MorphTypeNotFoundError",
    "MorphTypeTableError",
    "__version__",
]
