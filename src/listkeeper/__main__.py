"""Run the listkeeper server: ``python -m listkeeper`` or ``listkeeper``."""

import logging

import uvicorn

from listkeeper.api import create_app
from listkeeper.config import get_settings
from listkeeper.database import Database
from listkeeper.exceptions import ListkeeperError
from listkeeper.log import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        database = Database(settings.db_dir)
    except ListkeeperError as exc:
        logger.critical("Cannot open database at %s: %s", settings.db_dir, exc)
        raise SystemExit(1) from exc

    app = create_app(database, settings)
    logger.info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
