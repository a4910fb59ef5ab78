# tests\__init__.py
"""
Test Suite for lexmorph.

Organization:
- `core`: Domain models, morphology algorithms and use cases.
- `adapters`: Morph-type table loading, in-memory repositories, writing systems.
- `shared`: Settings, caching.
- `test_cli.py`: Command line smoke tests.
"""
