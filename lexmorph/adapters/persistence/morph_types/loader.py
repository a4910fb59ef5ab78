# lexmorph/adapters/persistence/morph_types/loader.py
"""
morph_types/loader.py
=====================

Load a morph-type table from JSON.

File format
-----------

    {
      "meta": {"version": "1", "description": "..."},
      "morph_types": [
        {"id": "suffix", "name": "suffix", "prefix": "-", "postfix": null,
         "is_affix_type": true, "is_suffixish": true},
        ...
      ]
    }

The order of `morph_types` is significant: classification scans the table
in that order.

Error behaviour
---------------
Any problem (missing file, invalid JSON, a record failing validation,
duplicate ids) raises `MorphTypeTableError` carrying the path and detail.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog
from pydantic import BaseModel, Field, ValidationError

from lexmorph.adapters.persistence.morph_types.repository import InMemoryMorphTypeRepository
from lexmorph.core.domain.exceptions import MorphTypeTableError
from lexmorph.core.domain.models import MorphType
from lexmorph.shared.config import BUNDLED_MORPH_TYPES_PATH

logger = structlog.get_logger()


class MorphTypeTableMeta(BaseModel):
    version: Optional[str] = None
    description: Optional[str] = None


class MorphTypeTableFile(BaseModel):
    """Schema of a morph-type table file."""
    meta: MorphTypeTableMeta = Field(default_factory=MorphTypeTableMeta)
    morph_types: List[MorphType]


def parse_morph_types(raw: Dict[str, Any], *, source: str = "<memory>") -> List[MorphType]:
    """Validate an already-parsed table document and return its morph types."""
    try:
        table = MorphTypeTableFile.model_validate(raw)
    except ValidationError as e:
        raise MorphTypeTableError(source, str(e)) from e
    return table.morph_types


def load_morph_types(path: Union[str, Path, None] = None) -> List[MorphType]:
    """Read and validate a morph-type table file (the bundled table by default)."""
    path = Path(path) if path is not None else BUNDLED_MORPH_TYPES_PATH

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise MorphTypeTableError(str(path), "file not found") from e
    except json.JSONDecodeError as e:
        raise MorphTypeTableError(str(path), f"invalid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise MorphTypeTableError(str(path), "top-level JSON must be an object")

    morph_types = parse_morph_types(raw, source=str(path))
    logger.info("morph_type_table_loaded", path=str(path), count=len(morph_types))
    return morph_types


def load_morph_type_repository(path: Union[str, Path, None] = None) -> InMemoryMorphTypeRepository:
    """Load a table file into an `InMemoryMorphTypeRepository`."""
    path = Path(path) if path is not None else BUNDLED_MORPH_TYPES_PATH
    return InMemoryMorphTypeRepository(load_morph_types(path), source=str(path))


__all__ = [
    "MorphTypeTableFile",
    "parse_morph_types",
    "load_morph_types",
    "load_morph_type_repository",
]
