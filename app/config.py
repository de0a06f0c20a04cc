"""
Configuration settings for the catering site API
Values come from the environment (or a local .env file)
"""
import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Get mode (development or production)
MODE = os.getenv("MODE", "development")
DEBUG = os.getenv('DEBUG', 'False') == 'True'


def get_env_var(key: str, default: str = None) -> str:
    """Fetch an environment variable and raise an error if it's missing (unless default is provided)."""
    value = os.getenv(key, default)
    if value is None and default is None:
        raise ValueError(f"Missing environment variable: {key}")
    return value


# Server
PORT = int(get_env_var("PORT", "5000"))

# Database URL
DATABASE_URL = get_env_var("DATABASE_URL", f"sqlite+aiosqlite:///{BASE_DIR / 'catering.db'}")

# Security
SECRET_KEY = os.getenv('SECRET_KEY', os.getenv('JWT_SECRET', 'your-secret-key-change-in-production'))
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = int(get_env_var("ACCESS_TOKEN_EXPIRE_HOURS", "24"))

# Seeded administrator
ADMIN_USERNAME = get_env_var("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = get_env_var("ADMIN_PASSWORD", "admin123")

# CORS Configuration
# A single frontend origin, or "*" to allow any origin
FRONTEND_URL = get_env_var("FRONTEND_URL", "http://localhost:8080")
CORS_ALLOWED_ORIGINS: List[str] = ["*"] if FRONTEND_URL == "*" else [FRONTEND_URL]
# Browsers reject credentials with a wildcard origin
CORS_ALLOW_CREDENTIALS = FRONTEND_URL != "*"

# Public base URL of this backend. Upload URLs are built from it, so it must
# stay the same for the lifetime of a deployment.
BACKEND_URL = get_env_var("BACKEND_URL", f"http://localhost:{PORT}").rstrip("/")

# Media uploads
UPLOAD_DIR = Path(get_env_var("UPLOAD_DIR", str(BASE_DIR / "uploads")))
UPLOAD_URL_PREFIX = "/uploads"
MAX_UPLOAD_SIZE = 50 * 1024 * 1024  # 50MB
ALLOWED_UPLOAD_EXTENSIONS = ("jpeg", "jpg", "png", "gif", "webp", "mp4", "webm", "mov")

# Site content document key
SITE_DATA_KEY = "main"
