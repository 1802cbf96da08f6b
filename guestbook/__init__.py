"""Guestbook API: sign, list, fetch, update and delete guestbook signatures.

Build the ASGI app with ``guestbook.app.create_app`` or run ``python -m guestbook``.
"""
