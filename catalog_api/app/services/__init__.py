"""
Service layer abstraction.

Each service encapsulates the business logic of one resource.  The
in-memory services are instances owning a ``Collection`` and are
created once per application; the persisted services (notes, note
categories) are stateless classes talking to SQLite.
"""
