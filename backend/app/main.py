"""
Credential Service Backend - FastAPI Application

Username/password signup and signin backed by a MongoDB collection.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.core.exceptions import (
    AuthError,
    StoreError,
    auth_error_handler,
    store_error_handler,
    validation_error_handler,
)
from app.core.logging import setup_logging
from app.database.connections import (
    close_mongo_client,
    create_mongo_client,
    get_auth_database,
)
from app.database.databases import auth_db
from app.database.registry import create_indexes
from app.routers import auth, health
from app.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the MongoDB client (unless a store was supplied)
    - Create indexes
    - Build the credential store

    Shutdown:
    - Close the MongoDB client
    """
    logger.info("Starting up credential service...")

    client = None
    if app.state.credential_store is None:
        settings = get_settings()
        client = create_mongo_client(settings)
        db = get_auth_database(client, settings)
        try:
            await create_indexes(db)
            logger.info("✓ Indexes created")
        except Exception as e:
            logger.warning(f"⚠ Index creation failed: {e}")
        app.state.credential_store = CredentialStore(db[auth_db.Collections.USERS])

    yield

    logger.info("Shutting down credential service...")
    close_mongo_client(client)


def create_app(store: Optional[CredentialStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Credential store to use. When omitted, one backed by the
            configured MongoDB is created at startup.
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Credential Service API",
        description="Signup and signin against stored username/password records.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.credential_store = store

    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health.router)
    app.include_router(auth.router)

    return app


app = create_app()
