import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.logging_config import setup_logging
from .core.object_storage import object_storage
from .core.db import engine
from .core.config import settings
from .models import Base
from .utils.exceptions import PortfolioError
from .routers import auth, categories, files, pages, blog, upload, dashboard, public, contact

# Set up logging as the first step
setup_logging()
logger = logging.getLogger(__name__)


def create_tables():
    """
    Creates all database tables based on the current models.
    Non-destructive: only tables that do not exist yet are created.
    """
    logger.info("Ensuring all database tables exist...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables checked.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    try:
        object_storage.ensure_bucket_exists()
    except Exception as e:
        # The public site can still serve pages without storage; uploads will fail loudly.
        logger.error(f"Could not reach object storage on startup: {e}")
    logger.info("Startup actions finished.")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Portfolio CMS",
    description="Content API for a photography portfolio: categories, media, pages and blog.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortfolioError)
async def handle_portfolio_error(request: Request, exc: PortfolioError):
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message, "code": exc.code})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    # Integer parts are list indexes or JSON decode offsets, not field names.
    location = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
    msg = first.get("msg") or "Invalid request"
    message = f"{location}: {msg}" if location else msg
    return JSONResponse(status_code=400, content={"error": message, "code": "VALIDATION_ERROR"})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred", "code": "INTERNAL_ERROR"})


@app.get(f"{settings.API_PREFIX}/health", tags=["Health"])
def health():
    return {"status": "ok"}


for router in (auth, categories, files, pages, blog, upload, dashboard, public, contact):
    app.include_router(router.router, prefix=settings.API_PREFIX)
