# staffboard/main.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import os
import logging

# Роутеры
from staffboard.api.department import router as department_router
from staffboard.api.employee import router as employee_router
from staffboard.api.project import router as project_router

from staffboard.core.settings import settings
from staffboard.core.exceptions import (
    BadRequestError,
    ConflictError,
    FieldError,
    NotFoundError,
    ReferentialIntegrityError,
    RequestValidationFailed,
)
from staffboard.database import SessionLocal, engine
from staffboard.models.base import Base
from staffboard.schemas.response import ErrorResponse

# Логирование
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("Staffboard.Main")

app = FastAPI(
    title="Staffboard API",
    version="1.0.0",
    description="Employees, departments and projects management backend",
)

# Middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Роутеры
app.include_router(department_router)
app.include_router(employee_router)
app.include_router(project_router)

# Health check & root
@app.get("/", tags=["Health"])
def root():
    return {"status": "Staffboard API is running!"}

@app.get("/health", tags=["Health"])
def health():
    return {"ok": True}

@app.on_event("startup")
def startup_event():
    logger.info(f"Starting Staffboard API ({settings.ENV})")
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DATA:
        from staffboard.initial_data import seed_initial_data

        db = SessionLocal()
        try:
            seed_initial_data(db)
        finally:
            db.close()

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Stopping Staffboard API")

# Exception handlers: единый формат {"message": ..., "errors": [...]}

def error_response(status_code: int, message: str, errors=None) -> JSONResponse:
    if errors is None:
        body = ErrorResponse(message=message)
    else:
        body = ErrorResponse.from_field_errors(message, errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )

@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    return error_response(404, exc.message)

@app.exception_handler(RequestValidationFailed)
async def validation_failed_exception_handler(request: Request, exc: RequestValidationFailed):
    return error_response(400, exc.message, exc.errors)

@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # Ошибки разбора запроса (тип поля, UUID в маршруте) отдаём в формате валидации
    errors = [
        FieldError(str(err["loc"][-1]) if err.get("loc") else "", err.get("msg", "Invalid value"))
        for err in exc.errors()
    ]
    return error_response(400, "Validation failed", errors)

@app.exception_handler(BadRequestError)
async def bad_request_exception_handler(request: Request, exc: BadRequestError):
    return error_response(400, exc.message)

@app.exception_handler(ReferentialIntegrityError)
async def referential_integrity_exception_handler(request: Request, exc: ReferentialIntegrityError):
    logger.warning(f"Referential integrity violation on {request.method} {request.url.path}: {exc.detail}")
    return error_response(400, exc.message)

@app.exception_handler(ConflictError)
async def conflict_exception_handler(request: Request, exc: ConflictError):
    logger.warning(f"Conflict on {request.method} {request.url.path}: {exc.detail}")
    return error_response(409, exc.message)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(500, "An internal server error occurred")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "staffboard.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=settings.DEBUG,
    )
