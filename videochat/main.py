# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging
import time

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.routes import ai_router, events_router, session_router, video_router
from .application.dto.common_dto import ErrorResponse
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .domain.exceptions import VideoChatError, get_user_message
from .domain.gateways.provider_gateway import ProviderGateway
from .domain.repositories.session_repository import SessionRepository
from .infrastructure.external import UnavailableGateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Builds the DI container (and with it the one shared Gemini client) before
    the first request is served. On shutdown, open sessions are closed and
    their videos deleted.
    """
    container = get_container()
    gateway = container.get(ProviderGateway)
    if isinstance(gateway, UnavailableGateway):
        logger.warning("Starting without a working Gemini client: %s", gateway.reason)
    
    settings = get_settings()
    logger.info("Server running on %s:%d", settings.host, settings.port)
    
    yield
    
    # Sessions live in memory only; their videos go with them
    sessions = container.get(SessionRepository)
    for session_id in sessions.list_ids():
        sessions.remove(session_id).close()
    
    logger.info("Application shutdown complete")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Every failure leaves the API as {"success": false, "error": "..."}"""
    
    @application.exception_handler(VideoChatError)
    async def video_chat_error_handler(request: Request, exc: VideoChatError):
        if exc.http_status >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
        return _error_response(exc.http_status, exc.user_message)
    
    @application.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return _error_response(400, message)
    
    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.critical(
            f"Unhandled exception for request {request.method} {request.url.path}",
            exc_info=True,
        )
        return _error_response(500, get_user_message(exc))


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware and request logging
    - Error handlers
    - API route registration and the static /uploads mount
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    setup_logging()
    settings = get_settings()
    
    # Create FastAPI app
    application = FastAPI(
        title="Video Chat API",
        version="1.0.0",
        description="Upload a video and chat about it with Gemini",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000
        logger.info(
            f"Request: {request.method} {request.url.path} - Response: {response.status_code} - Time: {process_time:.2f}ms"
        )
        return response
    
    register_exception_handlers(application)
    
    # Register API routers
    application.include_router(video_router, prefix="/api/video")
    application.include_router(ai_router, prefix="/api/ai")
    application.include_router(session_router, prefix="/api/sessions")
    application.include_router(events_router)
    
    # Uploaded videos are served as-is
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    application.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")
    
    @application.get("/")
    async def root() -> dict:
        return {"message": "Video Analysis API is running"}
    
    return application


# Create application instance
app = create_application()


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    import uvicorn
    
    settings = get_settings()
    uvicorn.run("videochat.main:app", host=settings.host, port=settings.port)
