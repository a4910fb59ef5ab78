"""
Persistence adapters: the morph-type table and the lexicon store.
"""

from lexmorph.adapters.persistence.lexicon_repository import InMemoryLexiconRepository
from lexmorph.adapters.persistence.morph_types import InMemoryMorphTypeRepository, load_morph_type_repository

__all__ = ["InMemoryLexiconRepository", "InMemoryMorphTypeRepository", "load_morph_type_repository"]
