"""
FastAPI dependencies.
"""
from socialnet.dependencies.auth import CurrentAdmin, CurrentUser, get_current_user

__all__ = ["CurrentAdmin", "CurrentUser", "get_current_user"]
