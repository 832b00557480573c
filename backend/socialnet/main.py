"""
socialnet Backend - FastAPI Application

Account registration, login and user listing on top of a
connection-per-operation MongoDB layer.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from socialnet.config import get_settings
from socialnet.core.logging_setup import configure_logging
from socialnet.core.security import make_encryptor
from socialnet.database.connections import ConnectionGateway
from socialnet.database.registry import create_indexes
from socialnet.database.store import CollectionStore
from socialnet.database.user_repository import UserRepository
from socialnet.routers import auth, health, users
from socialnet.services.reset_service import DatabaseReset, file_seed_loader

logger = logging.getLogger("socialnet")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Create indexes (unique email)
    - Reseed the users collection when RESET_ON_STARTUP is set
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting up socialnet backend...")

    gateway = ConnectionGateway(settings)
    indexes = await create_indexes(gateway)
    if indexes.ok:
        logger.info("Database indexes created")
    else:
        logger.warning("Database indexes could not be created at startup")

    if settings.reset_on_startup:
        user_repository = UserRepository(gateway)
        database_reset = DatabaseReset(
            CollectionStore(gateway),
            user_repository,
            make_encryptor(settings),
            file_seed_loader(settings.seed_data_path),
        )
        await database_reset.reset()

    yield

    logger.info("Shutting down socialnet backend...")


# Create FastAPI application
app = FastAPI(
    title="socialnet API",
    description="""
## socialnet API

### Features
- **Sign-up**: form validation with email uniqueness check
- **Login**: JWT access token
- **Users**: list of the other registered users
- **Admin**: reseed the users collection

### Authentication
Protected endpoints take the JWT token as a query parameter:
```
GET /users?token=your_jwt_token
```

Obtain a token via `POST /login` or `POST /signup`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "socialnet API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
