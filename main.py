# --- File: main.py ---
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from api import endpoints
from api.models import EncryptResponse, DecryptResponse, ErrorResponse, HealthResponse
from contextlib import asynccontextmanager
import uvicorn
import logging
import config

from security.key_provider import KeyProvider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    logger.info("Application startup sequence initiated...")
    if endpoints._key_provider_instance is None:
        logger.info("Lifespan: Initializing KeyProvider...")
        endpoints._key_provider_instance = KeyProvider.from_config()
    key_provider = endpoints._key_provider_instance
    if not key_provider.can_encrypt:
        logger.error("Lifespan: No usable public key. /encrypt will return errors.")
    if not key_provider.can_decrypt:
        logger.error("Lifespan: No usable private key. /decrypt will return errors.")

    yield

    # --- Shutdown ---
    logger.info("Application shutdown sequence initiated...")
    endpoints._key_provider_instance = None
    logger.info("Application shutdown complete.")

app = FastAPI(
    title=config.API_TITLE,
    description=config.API_DESCRIPTION,
    version=config.API_VERSION,
    docs_url=f"{config.API_PREFIX}/docs",
    openapi_url=f"{config.API_PREFIX}/openapi.json",
    lifespan=lifespan
)

logger.info(f"CORS allowed origins: {config.CORS_ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    path = request.url.path
    message = next(
        (msg for suffix, msg in endpoints.VALIDATION_ERROR_MESSAGES.items() if path.endswith(suffix)),
        "Invalid request body."
    )
    logger.warning(f"Rejected request body at {path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(status_code=400, content={"error": message})

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    logger.error(f"HTTP Exception: Status Code={exc.status_code}, Detail={exc.detail}, Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled Exception at Path {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected internal server error occurred."},
    )

error_responses = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

app.post(
    f"{config.API_PREFIX}/encrypt", response_model=EncryptResponse, summary="Encrypt a plaintext message",
    tags=["Encryption"], responses=error_responses
)(endpoints.encrypt_message)

app.post(
    f"{config.API_PREFIX}/decrypt", response_model=DecryptResponse, summary="Decrypt an encrypted message",
    tags=["Encryption"], responses=error_responses
)(endpoints.decrypt_message)

app.get(
    "/health", response_model=HealthResponse, summary="Key readiness check", tags=["General"]
)(endpoints.health_check)

@app.get("/", summary="Root endpoint", tags=["General"], include_in_schema=False)
async def read_root():
    return {"message": f"Welcome to the {config.API_TITLE}! See {config.API_PREFIX}/docs for details."}

if __name__ == "__main__":
    logger.info("Starting encryption API server using Uvicorn...")

    log_level = config.LOG_LEVEL_FROM_ENV.lower()
    logger.info(f"Server starting on {config.HOST}:{config.PORT} with log level {log_level} and reload {'enabled' if config.RELOAD else 'disabled'}")

    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=log_level,
        reload=config.RELOAD
    )
