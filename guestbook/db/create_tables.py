"""Create the ``signatures`` table: ``python -m guestbook.db.create_tables``."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from guestbook.core.config import ConfigurationError, get_settings
from guestbook.core.logging_config import setup_logging

from .session import Base, get_engine
from . import models  # noqa: F401  # registers SignatureRecord on Base.metadata

logger = logging.getLogger(__name__)


def create_all() -> None:
    """Create missing tables; existing ones are left untouched."""
    Base.metadata.create_all(bind=get_engine())


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)
    try:
        create_all()
    except ConfigurationError as exc:
        logger.error("Cannot create the signatures table: %s", exc)
        raise SystemExit(1) from exc
    except SQLAlchemyError as exc:
        logger.error("Failed to create the signatures table: %s", exc)
        raise SystemExit(1) from exc
    logger.info("Signatures table ready")


if __name__ == "__main__":
    main()
