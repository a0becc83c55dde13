"""Business logic services used by HTTP controllers.

`StudentService` coordinates the student repository. It is intentionally
thin: each operation performs one existence or uniqueness check and then
persists through the repository. The email pre-check on create is backed
by the table's unique constraint, which wins if two requests race.
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from . import models, repositories
from .exceptions import DuplicateEmailError, StudentNotFoundError

logger = logging.getLogger("student_api.services")


class StudentService:
    """Create, read, update and delete students."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.StudentRepository(session)

    def list_all(self) -> List[models.Student]:
        """Return every student in storage order."""
        return self.repo.find_all()

    def create(self, candidate: models.Student) -> models.Student:
        """Persist a new student and return it with its assigned id.

        Raises `DuplicateEmailError` if the email is already taken; nothing
        is written in that case.
        """
        if self.repo.find_by_email(candidate.email) is not None:
            logger.warning("rejected create: email %s already exists", candidate.email)
            raise DuplicateEmailError(candidate.email)
        candidate.id = None
        student = self._save(candidate)
        logger.info("created student id=%s", student.id)
        return student

    def get_by_id(self, student_id: int) -> Optional[models.Student]:
        """Return the student with `student_id` or `None`."""
        return self.repo.find_by_id(student_id)

    def update(self, candidate: models.Student) -> models.Student:
        """Replace names and email of the student identified by `candidate.id`.

        Raises `StudentNotFoundError` when no such student exists and
        `DuplicateEmailError` when the new email belongs to someone else.
        """
        if candidate.id is None or self.repo.find_by_id(candidate.id) is None:
            logger.warning("rejected update: student id=%s not found", candidate.id)
            raise StudentNotFoundError(candidate.id)
        student = self._save(candidate)
        logger.info("updated student id=%s", student.id)
        return student

    def delete(self, student_id: int) -> None:
        """Remove a student; raises `StudentNotFoundError` if it does not exist."""
        if self.repo.find_by_id(student_id) is None:
            logger.warning("rejected delete: student id=%s not found", student_id)
            raise StudentNotFoundError(student_id)
        self.repo.delete_by_id(student_id)
        logger.info("deleted student id=%s", student_id)

    def _save(self, candidate: models.Student) -> models.Student:
        try:
            return self.repo.save(candidate)
        except IntegrityError as exc:
            # the only unique column besides the primary key
            logger.warning("unique constraint rejected email %s", candidate.email)
            raise DuplicateEmailError(candidate.email) from exc
