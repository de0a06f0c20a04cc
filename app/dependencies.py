"""
Shared dependencies for FastAPI routes
"""
from app.database import get_async_session
from app.apps.authentication.dependencies import get_current_user, get_current_user_optional

# Database dependency (already defined in database.py)
# Just re-export it for convenience
get_db = get_async_session

__all__ = ["get_db", "get_current_user", "get_current_user_optional"]
