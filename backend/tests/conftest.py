from pathlib import Path
import os
import pytest

# Point the app at a throwaway SQLite file before `student_api` is imported.
TEST_DB = Path(__file__).resolve().parents[1] / "test.db"
if TEST_DB.exists():
    TEST_DB.unlink()
os.environ["ENV"] = "dev"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB}"

from sqlmodel import Session, select  # noqa: E402

from student_api import models  # noqa: E402
from student_api.database import create_db_and_tables, engine  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def remove_test_db():
    """Drop the SQLite file once the whole run is over."""
    yield
    engine.dispose()
    TEST_DB.unlink(missing_ok=True)


@pytest.fixture(autouse=True)
def clean_students():
    """Start every test with an empty `students` table."""
    create_db_and_tables()
    with Session(engine) as session:
        for student in session.exec(select(models.Student)).all():
            session.delete(student)
        session.commit()
    yield


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s
