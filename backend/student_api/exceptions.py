"""Domain errors raised by the service layer.

Every error derives from `StudentError`, which carries a machine-readable
`code` and the HTTP status the API maps it to. Services raise these and
never `HTTPException`; the translation happens in one exception handler
registered on the application.
"""

from fastapi import status


class StudentError(Exception):
    """Base class for all student domain errors."""
    code = "STUDENT_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StudentNotFoundError(StudentError):
    """The requested id does not resolve to a stored student."""
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student with id {student_id} not found")


class DuplicateEmailError(StudentError):
    """Another student already uses the submitted email."""
    code = "DUPLICATE_EMAIL"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Student with email {email} already exists")
