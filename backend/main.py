"""FastAPI main application: masterdata tables and story reader."""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import stories as stories_api
from backend.app.config import log_resolved_paths
from backend.app.core.error_handling import create_error_response, log_error_with_context, node_for_path
from shared.config import _env_flag, masterdata_dir, plain_script_dir

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


def _parse_cors_allowlist(raw: str) -> list[str]:
    origins = [o.strip() for o in raw.split(",") if o and o.strip()]
    if origins:
        return origins
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]


DEV_MODE = _env_flag("STORYDASH_DEV_MODE", default=True)
CORS_ALLOW_ORIGINS = _parse_cors_allowlist(os.environ.get("STORYDASH_CORS_ALLOW_ORIGINS", ""))


def _validate_environment() -> None:
    """Log data directory checks at startup. Never fails."""
    md = masterdata_dir()
    if md.exists():
        yamls = list(md.glob("*.yaml"))
        logger.info("Masterdata: %d tables in %s", len(yamls), md)
    else:
        logger.warning("Masterdata directory missing: %s (run the extraction tool first)", md)

    plain = plain_script_dir()
    if plain.exists():
        logger.info("Story scripts: %s (exists)", plain)
    else:
        logger.warning("Story script directory missing: %s (story text will be unavailable)", plain)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not DEV_MODE and "*" in CORS_ALLOW_ORIGINS:
        raise RuntimeError(
            "Unsafe CORS config: '*' is only allowed in dev mode. "
            "Set STORYDASH_CORS_ALLOW_ORIGINS to explicit origins."
        )
    log_resolved_paths()
    _validate_environment()
    logger.info("API startup complete (dev_mode=%s)", DEV_MODE)
    yield


app = FastAPI(title="Story Dashboard API", version=APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTPExceptions with structured error responses."""
    node = node_for_path(request.url.path)
    error_response = create_error_response(
        error_code=f"{node.upper()}_HTTP_{exc.status_code}",
        message=exc.detail,
        node=node,
        details={
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )
    return JSONResponse(status_code=exc.status_code, content=error_response)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler: return structured error responses with logging."""
    node = node_for_path(request.url.path)

    log_error_with_context(exc, node, path=request.url.path, method=request.method)

    message = f"An error occurred: {type(exc).__name__}"
    if str(exc):
        message = str(exc)

    error_response = create_error_response(
        error_code=f"{node.upper()}_ERROR",
        message=message,
        node=node,
        details={
            "exception_type": type(exc).__name__,
            "path": request.url.path,
        },
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_response)


app.include_router(stories_api.router)


@app.get("/")
async def root():
    return {"message": "Story Dashboard API", "version": APP_VERSION}


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3001)
