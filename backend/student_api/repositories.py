"""Repository encapsulating database operations on the `students` table.

The repository returns SQLModel objects and performs commits/refreshes
where appropriate. It holds no business rules; existence and uniqueness
checks belong to the service layer.
"""

from typing import List, Optional
from sqlalchemy.exc import DataError, IntegrityError
from sqlmodel import Session, select
from . import models


class StudentRepository:
    """CRUD operations for `Student` objects."""
    def __init__(self, session: Session):
        self.session = session

    def save(self, student: models.Student) -> models.Student:
        """Insert or update `student` by primary key and return the managed instance.

        A transient object with `id=None` is inserted; one carrying an
        existing id replaces that row's fields. Constraint violations roll
        the session back before the `IntegrityError` is re-raised.
        """
        if student.id is None:
            self.session.add(student)
            managed = student
        else:
            managed = self.session.merge(student)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        self.session.refresh(managed)
        return managed

    def find_by_id(self, student_id: int) -> Optional[models.Student]:
        """Get a `Student` by primary key.

        Ids outside the column's integer range cannot have been assigned,
        so they resolve to `None` like any other unknown id.
        """
        try:
            return self.session.get(models.Student, student_id)
        except (OverflowError, DataError):
            self.session.rollback()
            return None

    def find_by_email(self, email: str) -> Optional[models.Student]:
        """Return a `Student` by email or `None` if not found."""
        stmt = select(models.Student).where(models.Student.email == email)
        return self.session.exec(stmt).first()

    def find_all(self) -> List[models.Student]:
        stmt = select(models.Student)
        return list(self.session.exec(stmt).all())

    def delete_by_id(self, student_id: int) -> None:
        """Delete the row with `student_id`; missing rows are ignored."""
        student = self.find_by_id(student_id)
        if student is None:
            return
        self.session.delete(student)
        self.session.commit()
