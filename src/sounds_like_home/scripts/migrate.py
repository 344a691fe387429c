# src/sounds_like_home/scripts/migrate.py
from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from sounds_like_home.core.logging_config import configure_logging
from sounds_like_home.core.settings import settings

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def build_config(database_url: str | None = None) -> Config:
    """Return an Alembic config pointed at the project's migrations."""
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url or settings.database_url_sync)
    return cfg


def run_upgrade_head(database_url: str | None = None) -> None:
    cfg = build_config(database_url)
    logger.info("Upgrading %s to head", cfg.get_main_option("sqlalchemy.url"))
    command.upgrade(cfg, "head")


def main() -> None:
    configure_logging(settings.log_level, settings.log_format)
    run_upgrade_head()


if __name__ == "__main__":
    main()
