"""
Ports (interfaces) implemented by the infrastructure adapters.
"""

from lexmorph.core.ports.form_repository import IFormRepository
from lexmorph.core.ports.morph_type_repository import IMorphTypeRepository
from lexmorph.core.ports.writing_systems import IWritingSystemService

__all__ = ["IFormRepository", "IMorphTypeRepository", "IWritingSystemService"]
