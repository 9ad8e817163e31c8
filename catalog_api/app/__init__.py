"""
Application package initializer.

The project is organised into logical pieces: ``core`` (configuration,
logging, storage, errors and the generic collection), ``schemas``,
``services`` and the versioned ``api`` routers.  Each resource (games,
books, authors, categories, notes) has its own schema, service and
router modules.
"""

from .main import app, create_app  # noqa: F401
