"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the Student records backend.
Controllers are intentionally thin: they accept requests, delegate to
`StudentService`, and map results to status codes.

Endpoints implemented:
- GET /api/v1/students
- POST /api/v1/students
- GET /api/v1/students/{id}
- PUT /api/v1/students/{id}
- DELETE /api/v1/students/{id}
- GET /health
"""

from typing import List
from fastapi import FastAPI, APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import services, models
from .exceptions import StudentError
from .schemas import StudentIn, StudentOut
from .config import settings

STUDENTS_PATH = "/api/v1/students"

app = FastAPI(title="Student Records API")
logger = logging.getLogger("student_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()


def _request_log_payload(request: Request, req_id: str, elapsed_ms: float, **extra) -> str:
    payload = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": elapsed_ms,
        "client": request.client.host if request.client else "unknown",
    }
    payload.update(extra)
    return json.dumps(payload, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    logged = request.url.path.startswith(STUDENTS_PATH)
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        if logged:
            logger.exception("request_failed %s", _request_log_payload(request, req_id, elapsed_ms))
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if logged:
        logger.info(
            "request_done %s",
            _request_log_payload(request, req_id, elapsed_ms, status_code=response.status_code),
        )
    return response


@app.exception_handler(StudentError)
async def student_error_handler(request: Request, exc: StudentError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


router = APIRouter(prefix=STUDENTS_PATH, tags=["students"])


@router.get("", response_model=List[StudentOut])
def list_students(db: Session = Depends(get_session)):
    """List every stored student (possibly an empty array)."""
    return services.StudentService(db).list_all()


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(payload: StudentIn, db: Session = Depends(get_session)):
    """Create a student and return it with its generated id.

    Fails with 409 when the email is already in use.
    """
    candidate = models.Student(**payload.model_dump())
    return services.StudentService(db).create(candidate)


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: int, db: Session = Depends(get_session)):
    """Return one student, or an empty 404 when the id is unknown."""
    student = services.StudentService(db).get_by_id(student_id)
    if student is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return student


@router.put("/{student_id}", response_model=StudentOut)
def update_student(student_id: int, payload: StudentIn, db: Session = Depends(get_session)):
    """Replace a student's names and email.

    The stored id always wins over anything in the body. Unknown ids get
    an empty 404.
    """
    svc = services.StudentService(db)
    existing = svc.get_by_id(student_id)
    if existing is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    candidate = models.Student(id=existing.id, **payload.model_dump())
    return svc.update(candidate)


@router.delete("/{student_id}", response_class=PlainTextResponse)
def delete_student(student_id: int, db: Session = Depends(get_session)):
    """Delete a student and return a plain-text confirmation."""
    services.StudentService(db).delete(student_id)
    return f"Student with id {student_id} deleted successfully"


app.include_router(router)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
