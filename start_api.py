#!/usr/bin/env python3
"""
Wait for the database, run migrations (same DATABASE_URL), seed, then uvicorn.
Ensures tables exist before seed and app start.
"""
import logging
import os
import sys

from tourbook.core.config import settings
from tourbook.db.session import wait_for_db

logging.basicConfig(level=settings.LOG_LEVEL)

# 1) Wait for DB
wait_for_db(settings.DATABASE_URL, timeout_s=settings.DB_WAIT_TIMEOUT, delay_s=settings.DB_RETRY_DELAY)

# 2) Run migrations using the same settings as the app
from alembic.config import Config
from alembic import command

alembic_cfg = Config(os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic.ini"))
alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
command.upgrade(alembic_cfg, "head")

# 3) Seed
from tourbook.seed import run as run_seed
run_seed()

# 4) Start uvicorn (replace current process)
os.execv(
    sys.executable,
    [sys.executable, "-m", "uvicorn", "tourbook.main:app", "--host", "0.0.0.0", "--port", str(settings.PORT)],
)
