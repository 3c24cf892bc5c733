# mentor_match/main.py
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy import text
from starlette.staticfiles import StaticFiles

from .config import get_settings
from .constants import ErrorMessages
from .database import create_db_and_tables, SessionLocal
from .services.user_service import UserService
from .routers import auth_router, profile_router, mentor_router, matching_router

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(
    title="Mentor-Mentee Matching API",
    description="API for mentor-mentee matching: signup, profiles, mentor search and matching requests.",
    version="1.0.0",
)

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_REQUESTS} per {settings.RATE_LIMIT_WINDOW_MINUTES} minutes"],
    enabled=settings.RATE_LIMIT_ENABLED,
)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Default profile images
app.mount("/public", StaticFiles(directory=STATIC_DIR), name="public")

# Include routers
app.include_router(auth_router.router)
app.include_router(profile_router.router)
app.include_router(mentor_router.router)
app.include_router(matching_router.router)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a 400, not FastAPI's default 422"""
    logger.info("Validation failed for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=400,
        content={"detail": "Validation failed", "errors": jsonable_encoder(exc.errors())},
    )

# Called synchronously by SlowAPIMiddleware, so this must not be async
def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
    return JSONResponse(status_code=429, content={"detail": ErrorMessages.TOO_MANY_REQUESTS})

app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info("Application startup event triggered.")
    try:
        create_db_and_tables()

        if settings.SEED_DEFAULT_ACCOUNTS:
            with SessionLocal() as db:
                UserService(db).seed_default_accounts()

        logger.info("Startup sequence completed successfully.")
    except Exception as e:
        logger.critical(f"Critical error during startup: {e}", exc_info=True)
        raise

@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/docs")

@app.get("/health")
@limiter.exempt
def health_check():
    """Health check endpoint"""
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "ok"}
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(status_code=503, content={"status": "unhealthy", "database": "unavailable"})
