"""
Core module - Security, logging setup and other core utilities.
"""
from socialnet.core.logging_setup import configure_logging
from socialnet.core.security import (
    PasswordEncryptor,
    make_encryptor,
    create_access_token,
    decode_token,
)

__all__ = [
    "configure_logging",
    "PasswordEncryptor",
    "make_encryptor",
    "create_access_token",
    "decode_token",
]
