import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobboard.config import get_settings
from jobboard.errors import ServiceError
from jobboard.routers import health, users, companies, jobs, saved_jobs

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Job Board",
    description="Recruiters post jobs, candidates apply, recruiters review applications",
    version="1.0.0",
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(saved_jobs.router, prefix="/user/saved", tags=["saved-jobs"])
app.include_router(users.router, prefix="/user", tags=["users"])
app.include_router(companies.router, prefix="/company", tags=["companies"])
app.include_router(jobs.router, prefix="/job", tags=["jobs"])


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Render domain errors as the standard failure envelope."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies, params and paths are reported as 400, not FastAPI's 422."""
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Validation Error",
            "error": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with a 500 envelope."""
    # Log the exception with request context for debugging
    logger.exception(
        "Unhandled exception: %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )

    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )
