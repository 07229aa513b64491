"""
Database migration runner for Alembic migrations.
"""
import logging
import os
from alembic.config import Config
from alembic import command
from sqlalchemy import create_engine, text

logger = logging.getLogger(__name__)

ADVISORY_LOCK_ID = 815274301
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def get_alembic_config(database_url: str) -> Config:
    alembic_cfg = Config(os.path.join(ROOT_DIR, "alembic.ini"))
    alembic_cfg.set_main_option("script_location", os.path.join(ROOT_DIR, "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", database_url)
    return alembic_cfg


def run_migrations():
    """
    Run Alembic migrations to head revision.

    On PostgreSQL an advisory lock keeps concurrent app instances from
    migrating at the same time.
    """
    from app.core import config as app_config

    if not app_config.DATABASE_URL:
        raise ValueError("DATABASE_URL is not set")

    logger.info("RUN_MIGRATIONS=1 -> running alembic upgrade head")
    alembic_cfg = get_alembic_config(app_config.DATABASE_URL)
    use_lock = app_config.DATABASE_URL.startswith("postgresql")

    engine = create_engine(app_config.DATABASE_URL, pool_pre_ping=True)
    lock_conn = None

    try:
        if use_lock:
            lock_conn = engine.connect()
            lock_conn.execute(text(f"SELECT pg_advisory_lock({ADVISORY_LOCK_ID})"))
            lock_conn.commit()
            logger.info("Migration lock acquired")

        command.upgrade(alembic_cfg, "head")
        logger.info("Migrations complete")
    except Exception:
        logger.exception("Migration failed")
        raise
    finally:
        if lock_conn is not None:
            lock_conn.execute(text(f"SELECT pg_advisory_unlock({ADVISORY_LOCK_ID})"))
            lock_conn.commit()
            lock_conn.close()
        engine.dispose()
