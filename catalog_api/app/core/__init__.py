"""Configuration, logging, storage and shared building blocks."""
