# app/database_init.py
import logging

from sqlalchemy.engine import make_url
from sqlalchemy_utils import database_exists, create_database
from app.database import DATABASE_URL

logger = logging.getLogger(__name__)


def ensure_database():
    safe_url = make_url(DATABASE_URL).render_as_string(hide_password=True)
    if not database_exists(DATABASE_URL):
        create_database(DATABASE_URL)
        logger.info("Database created: %s", safe_url)
    else:
        logger.info("Database already exists: %s", safe_url)
