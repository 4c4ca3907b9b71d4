import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from records_admin.core.config import settings
from records_admin.core.errors import RecordError
from records_admin.core.logging_middleware import LoggingMiddleware
from records_admin.db.init_db import init_db
from records_admin.routers.auth import router as auth_router
from records_admin.routers.students import router as students_router
from records_admin.routers.teachers import router as teachers_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

# Middleware
app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error mapping
@app.exception_handler(RecordError)
async def record_error_handler(request: Request, exc: RecordError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# malformed bodies are a 400 here, not FastAPI's default 422
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api")
def welcome():
    return {"message": f"Welcome to the {settings.app_name} API!"}


# Startup event
@app.on_event("startup")
def on_startup():
    init_db()


# Include routers
app.include_router(auth_router, tags=["auth"])
app.include_router(students_router, prefix="/api", tags=["students"])
app.include_router(teachers_router, prefix="/api", tags=["teachers"])
