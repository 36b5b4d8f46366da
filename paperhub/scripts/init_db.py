"""
Initialize database schema.

Run ONCE when:
- first local setup
- new environment deployment

    python -m paperhub.scripts.init_db [--drop]
"""

import argparse
import logging

from paperhub.config import Config
from paperhub.database.db.models import Base
from paperhub.database.db.session import engine
from paperhub.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the paperhub tables")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    args = parser.parse_args(argv)

    setup_logging(Config.log_level, Config.log_file)

    if args.drop:
        logger.warning("Dropping all tables on %s", engine.url.render_as_string(hide_password=True))
        Base.metadata.drop_all(bind=engine)

    logger.info("Initializing database schema...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema initialized.")


if __name__ == "__main__":
    main()
