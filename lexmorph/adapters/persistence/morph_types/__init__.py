"""
Morph-type table adapters.

    loader.py      JSON file -> validated MorphType records
    repository.py  in-memory, versioned table implementing IMorphTypeRepository
"""

from lexmorph.adapters.persistence.morph_types.loader import (
    MorphTypeTableFile,
    load_morph_type_repository,
    load_morph_types,
    parse_morph_types,
)
from lexmorph.adapters.persistence.morph_types.repository import InMemoryMorphTypeRepository

__all__ = [
    "InMemoryMorphTypeRepository",
    "MorphTypeTableFile",
    "load_morph_type_repository",
    "load_morph_types",
    "parse_morph_types",
]
