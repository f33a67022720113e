"""FastAPI application entrypoint for email-intel-api."""
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables from .env file
load_dotenv()

from .config.config import get_cors_origins, get_extraction_reference_year
from .infrastructure.llm.openai_client import create_llm_client
from .presentation.dtos.errors import (
    create_error_response,
    create_internal_error_response,
    create_validation_error_response,
)
from .presentation.routers.auth_router import router as auth_router
from .presentation.routers.extraction_router import router as extraction_router
from .presentation.routers.health_router import router as health_router
from .presentation.routers.organization_router import router as organization_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
# Reduce HTTP client logging to WARNING to reduce noise
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('openai').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build service handles at startup and release them at shutdown."""
    app.state.reference_year = get_extraction_reference_year()
    logger.info(f"Extraction reference year: {app.state.reference_year}")
    app.state.llm_client = create_llm_client()
    try:
        yield
    finally:
        if app.state.llm_client is not None:
            app.state.llm_client.close()
        app.state.llm_client = None


app = FastAPI(title="email-intel-api", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(extraction_router)
app.include_router(organization_router)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request, exc: RequestValidationError):
    """Handle request body/query validation errors."""
    logger.warning(f"Request validation error on {request.url.path}: {exc.errors()}")
    return create_validation_error_response(exc.errors())


@app.exception_handler(ValidationError)
async def validation_exception_handler(request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    logger.error(f"Pydantic validation error on {request.url.path}: {exc.errors()}")
    return create_validation_error_response(exc.errors())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    """Render HTTP errors in the success/message envelope."""
    return create_error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}")
    return create_internal_error_response()
