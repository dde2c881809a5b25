# routers/health.py
import logging
from datetime import UTC, datetime
from pathlib import Path

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from db import engine, ping

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])

_ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def _db_connected() -> bool:
    try:
        ping()
        return True
    except Exception:
        logger.warning("health: database unreachable", exc_info=True)
        return False


@router.get("")
def health():
    connected = _db_connected()
    return {
        "ok": connected,
        "status": "OK",
        "timestamp": datetime.now(UTC).isoformat(),
        "database": "connected" if connected else "disconnected",
    }


def _code_heads() -> set[str]:
    script = ScriptDirectory.from_config(Config(str(_ALEMBIC_INI)))
    return set(script.get_heads())


def _db_revisions() -> set[str]:
    """Revisions stamped in alembic_version; empty for an unmigrated database."""
    with engine.connect() as conn:
        return set(MigrationContext.configure(conn).get_current_heads())


@router.get("/migrations")
def health_migrations():
    heads = _code_heads()
    try:
        applied = _db_revisions()
    except SQLAlchemyError:
        logger.warning("health: could not read alembic_version", exc_info=True)
        return {
            "ok": False,
            "status": "UNKNOWN",
            "database": "disconnected",
            "code_heads": sorted(heads),
            "db_version": None,
        }

    synced = bool(heads) and applied == heads
    return {
        "ok": synced,
        "status": "OK" if synced else "PENDING",
        "database": "connected",
        "code_heads": sorted(heads),
        "db_version": ", ".join(sorted(applied)) or None,
    }
