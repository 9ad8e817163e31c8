"""Fixture records used to seed the in-memory collections."""
