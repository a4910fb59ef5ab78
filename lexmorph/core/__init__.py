"""
Core Domain Layer.

This package contains the pure morphology logic and entities of the system.
It follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on infrastructure (files, databases).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
