"""Create the users and courses tables in the configured database.

Usage:
    python -m course_api.init_db
"""
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from course_api.core import config
from course_api.database import init_db


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL)
    try:
        init_db()
    except SQLAlchemyError as exc:
        print(f"Database initialization failed: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
