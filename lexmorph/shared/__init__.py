"""
Shared utilities package.

This module contains cross-cutting concerns used by both the Core Domain
and Infrastructure Adapters, including:
- Configuration management
- Structured logging
- Distributed tracing (Observability)
- Versioned build-then-publish caching
- Dependency Injection wiring
"""
