"""
FastAPI application entry point
Main application initialization
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.config import DEBUG, MODE, UPLOAD_DIR, UPLOAD_URL_PREFIX
from app.middleware.cors import setup_cors
from app.database import init_db, close_db
import logging

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# StaticFiles checks the directory when it is mounted
UPLOAD_DIR.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and the admin user on startup, close connections on shutdown"""
    logger.info(f"Starting application in {MODE} mode")
    await init_db()
    logger.info("Application started successfully")
    yield
    logger.info("Shutting down application")
    await close_db()
    logger.info("Application shut down successfully")


# Create FastAPI app
app = FastAPI(
    title="Catering Site API",
    description="Content, media and contact form backend for the catering website",
    version="0.1.0",
    debug=DEBUG,
    lifespan=lifespan,
)

# Setup CORS
setup_cors(app)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render errors as {success: false, message} so clients can match on message"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail, "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Leading element of a validation error `loc`
REQUEST_LOCATIONS = ("body", "path", "query", "header", "cookie")


def validation_message(exc: RequestValidationError) -> str:
    """First validation error as a short sentence, e.g. "Invalid name: Input should be a valid string"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    loc = list(first.get("loc", ()))
    if loc and loc[0] in REQUEST_LOCATIONS:
        loc = loc[1:]
    field = ".".join(str(part) for part in loc)
    if not field:
        return f"Invalid request: {first.get('msg')}"
    return f"Invalid {field}: {first.get('msg')}"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or mistyped input is a 400 with a readable message"""
    message = validation_message(exc)
    logger.info(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": message},
    )


@app.get("/")
async def root():
    """Root endpoint - health check"""
    return JSONResponse({
        "message": "Catering Site API",
        "version": "0.1.0",
        "mode": MODE,
        "status": "running"
    })


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse({
        "status": "healthy",
        "mode": MODE
    })


from app.apps.authentication.router import router as auth_router
app.include_router(auth_router, prefix="/api", tags=["authentication"])

from app.apps.sitedata.router import router as sitedata_router
app.include_router(sitedata_router, prefix="/api", tags=["sitedata"])

from app.apps.media.router import router as media_router
app.include_router(media_router, prefix="/api", tags=["media"])

from app.apps.contact.router import router as contact_router
app.include_router(contact_router, prefix="/api", tags=["contact"])

# Uploaded files are served as-is
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=str(UPLOAD_DIR)), name="uploads")


if __name__ == "__main__":
    import uvicorn
    from app.config import PORT
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info"
    )
