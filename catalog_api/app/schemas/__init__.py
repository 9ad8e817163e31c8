"""
Pydantic schema definitions for API payloads.

Each resource (games, books, authors, categories, notes) defines its
own models for request and response bodies.  JSON field names are
camelCase through field aliases; models accept both spellings.
"""
