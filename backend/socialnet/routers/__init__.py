"""
API routers.
"""
from socialnet.routers import auth, health, users

__all__ = ["auth", "health", "users"]
