"""
StudentResource: list, create, get, update and delete students.

Each operation validates its input, talks to the store through
``app.services.student.student`` and returns a ``StudentResult``.
Store failures are logged once here and never raised to the caller.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.validation import error_messages
from app.schemas.student import Student, StudentCreate, StudentUpdate
from app.services.student import student as crud_student
from app.services.student.results import (
    NotFound,
    Ok,
    StoreFailed,
    StudentResult,
    ValidationFailed,
)


class StudentNotFound(LookupError):
    def __init__(self, student_id: Any):
        super().__init__(f"No student found with id {student_id}")
        self.student_id = student_id


class StudentResource:
    def __init__(
        self,
        db: Session,
        logger: Optional[logging.Logger] = None,
        delete_missing_as_not_found: bool = False,
    ):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)
        self.delete_missing_as_not_found = delete_missing_as_not_found

    def _find_or_fail(self, student_id: int):
        db_student = crud_student.get_student(self.db, student_id)
        if db_student is None:
            raise StudentNotFound(student_id)
        return db_student

    def _rollback(self) -> None:
        try:
            self.db.rollback()
        except Exception as e:
            self.logger.error(f"Error rolling back student transaction: {e}")

    def list(self) -> StudentResult:
        try:
            students = [Student.model_validate(row) for row in crud_student.get_students(self.db)]
        except Exception as e:
            self.logger.error(f"Error fetching student data: {e}")
            return StoreFailed("failed to fetch student data")
        return Ok(students)

    def create(self, payload: Any) -> StudentResult:
        try:
            data = StudentCreate.model_validate(payload)
        except ValidationError as e:
            return ValidationFailed(error_messages(e.errors()))

        try:
            db_student = crud_student.create_student(self.db, data.model_dump())
        except Exception as e:
            self._rollback()
            self.logger.error(f"Error storing student data: {e}")
            return StoreFailed("failed to store student data", str(e))
        return Ok(Student.model_validate(db_student), status_code=201)

    def get(self, student_id: int) -> StudentResult:
        try:
            db_student = self._find_or_fail(student_id)
        except Exception as e:
            # Every lookup failure reads as "not found" to the client
            self.logger.error(f"Error fetching student data by id: {e}")
            return NotFound()
        return Ok(Student.model_validate(db_student))

    def update(self, student_id: int, payload: Any) -> StudentResult:
        try:
            db_student = self._find_or_fail(student_id)
        except StudentNotFound as e:
            return NotFound(str(e))
        except Exception as e:
            self.logger.error(f"Error updating student data: {e}")
            return StoreFailed("failed to update student data", str(e))

        try:
            changes = StudentUpdate.model_validate(payload).changes()
        except ValidationError as e:
            return ValidationFailed(error_messages(e.errors()))

        try:
            db_student = crud_student.update_student(self.db, db_student, changes)
        except Exception as e:
            self._rollback()
            self.logger.error(f"Error updating student data: {e}")
            return StoreFailed("failed to update student data", str(e))
        return Ok(Student.model_validate(db_student))

    def delete(self, student_id: int) -> StudentResult:
        try:
            db_student = self._find_or_fail(student_id)
            crud_student.delete_student(self.db, db_student)
        except StudentNotFound as e:
            self.logger.error(f"Error deleting student data: {e}")
            if self.delete_missing_as_not_found:
                return NotFound()
            return StoreFailed("failed to delete student data")
        except Exception as e:
            self._rollback()
            self.logger.error(f"Error deleting student data: {e}")
            return StoreFailed("failed to delete student data")
        return Ok(status_code=204)
