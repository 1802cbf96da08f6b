"""Run the guestbook API with uvicorn: ``python -m guestbook``."""
from __future__ import annotations

import logging

import uvicorn

from guestbook.app import create_app
from guestbook.core.config import ConfigurationError, get_settings

logger = logging.getLogger("guestbook")


def main() -> None:
    settings = get_settings()
    try:
        app = create_app()
    except ConfigurationError as exc:
        raise SystemExit(f"Startup aborted: {exc}") from exc
    logger.info("Server is listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
