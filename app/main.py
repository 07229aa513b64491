import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# ✅ Import All API Routes
from app.api.routes import auth, profile, applications, ai_feedback, analytics, health

from app.core import config
from app.core.logging_config import setup_logging, sanitize_log_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and make sure the schema exists before serving."""
    setup_logging(config.LOG_LEVEL)

    if config.RUN_MIGRATIONS:
        from app.db.migrate import run_migrations
        run_migrations()
    else:
        from app.db.init_db import init_db
        init_db()

    logger.info("JobTrack API started")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="JobTrack API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# ============================================
# ✅ ERROR HANDLERS
# ============================================

def format_validation_errors(errors) -> str:
    """Flatten pydantic errors into one readable sentence."""
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        msg = error.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(messages) or "Invalid request"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Validation failures are client errors: 400 with a human-readable message."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": format_validation_errors(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    context = sanitize_log_data({
        "method": request.method,
        "path": request.url.path,
        "query": dict(request.query_params),
        "headers": dict(request.headers),
    })
    logger.error(f"Unhandled error: {context}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

API_PREFIX = "/api"

app.include_router(auth.router, prefix=API_PREFIX)
app.include_router(profile.router, prefix=API_PREFIX)
app.include_router(applications.router, prefix=API_PREFIX)
app.include_router(ai_feedback.router, prefix=API_PREFIX)
app.include_router(analytics.router, prefix=API_PREFIX)
app.include_router(health.router, prefix=API_PREFIX)


@app.get("/")
def root():
    return {"status": "JobTrack API running"}
