from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import SessionLocal
from app.core.logging import logger
from app.services.student.resource import StudentResource


def get_db() -> Generator:
    """
    Database session dependency.
    The session is closed once the request finishes, even on error.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_student_resource(db: Session = Depends(get_db)) -> StudentResource:
    """StudentResource bound to the request's session and the app logger."""
    return StudentResource(
        db,
        logger=logger.getChild("students"),
        delete_missing_as_not_found=settings.DELETE_MISSING_AS_NOT_FOUND,
    )
