"""
Top-level package for the Catalog API.

All functionality lives in submodules under ``app``; import the
application as ``catalog_api.app.main:app``.
"""

__all__ = []
