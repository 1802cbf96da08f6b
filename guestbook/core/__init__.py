"""
Core utilities shared across the guestbook API.

Configuration (environment variables, optional ``.env`` file) and logging
setup live here so routers and repositories never read ``os.environ``
directly.
"""
