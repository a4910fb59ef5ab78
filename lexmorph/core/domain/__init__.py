"""
Domain Entities and Value Objects.

This package defines the core data structures used throughout the library
(MorphType, RichText, LexEntry, MorphForm, ...) and the exceptions raised
by domain operations. They are devoid of any infrastructure logic.
"""
