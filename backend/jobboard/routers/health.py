import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.config import get_settings
from jobboard.database import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


def _database_status(db: Session) -> str:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Health check could not reach the database: %s", e)
        if get_settings().expose_error_details:
            return f"unhealthy: {e}"
        return "unhealthy"
    return "healthy"


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Report whether the API can reach its database.

    Always answers 200 and needs no token; a lost database shows up as
    ``"status": "degraded"``. Runs in FastAPI's threadpool since the
    session is synchronous.
    """
    database = _database_status(db)
    return {
        "status": "ok" if database == "healthy" else "degraded",
        "database": database,
        "environment": get_settings().environment,
    }
