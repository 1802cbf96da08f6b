"""
Persistence adapters.

Routers depend on the ``SignatureStore`` interface rather than touching
SQLAlchemy sessions directly.
"""
