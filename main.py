import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from db import Base, SessionLocal, engine
from errors import IcebreakerError

# Routers
from routers.admin import router as admin_router
from routers.health import router as health_router
from routers.questions import router as questions_router
from routers.teams import router as teams_router
from seed import seed_sample_data

logger = logging.getLogger("icebreaker")
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
).split(",")


def _env_flag(name: str, default: bool = True) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Dev convenience; deployed databases are migrated with `alembic upgrade head`.
    # With AUTO_CREATE_TABLES on, a database we can't reach is fatal.
    auto_create = _env_flag("AUTO_CREATE_TABLES")
    try:
        if auto_create:
            Base.metadata.create_all(bind=engine)
        if _env_flag("SEED_SAMPLE_DATA"):
            with SessionLocal() as db:
                seed_sample_data(db)
    except SQLAlchemyError:
        if auto_create:
            logger.exception("Database unavailable at startup; refusing to start")
            raise
        logger.exception("Sample data seeding failed; continuing without it")
    yield


app = FastAPI(title="Ice Breaker API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in CORS_ORIGINS if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


# --- Error mapping ----------------------------------------------------------------


@app.exception_handler(IcebreakerError)
async def icebreaker_error_handler(request: Request, exc: IcebreakerError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed bodies/params are client errors: 400, not FastAPI's 422
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"detail": f"{loc}: {msg}" if loc else msg},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/")
def health_root():
    return {"ok": True}


# Register routers
app.include_router(teams_router)  # /api/teams/..., /api/users
app.include_router(questions_router)  # /api/admin/questions/...
app.include_router(admin_router)  # /api/admin/usage-stats, /api/admin/teams/.../reset
app.include_router(health_router)  # /health, /health/migrations
