"""
PetAdopt API application.

Builds the FastAPI app over a document store, wires the services and
routers, and runs it with uvicorn.
"""

import sys
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from loguru import logger

from .config import Settings, get_settings
from .error_handlers import register_exception_handlers
from .routes import ROUTERS
from .services import AdoptionWorkflow, MockDataGenerator, PetsService, UsersService
from .utils.security import hash_password
from .utils.store_clients import DocumentStore, create_store


def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to stderr at the given level."""
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level.upper())


def create_app(config: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Settings to use; defaults to the global settings
        store: Document store to use; defaults to the configured backend

    Returns:
        Configured FastAPI application
    """
    config = config or get_settings()
    configure_logging(config.log_level)

    store = store or create_store(config)
    users_service = UsersService(
        store,
        collection=config.firestore_collection_users,
        bcrypt_rounds=config.bcrypt_rounds
    )
    pets_service = PetsService(store, collection=config.firestore_collection_pets)
    adoption_workflow = AdoptionWorkflow(
        store,
        users_service,
        pets_service,
        collection=config.firestore_collection_adoptions
    )
    # Generated users share one hash, computed once per application
    mock_generator = MockDataGenerator(
        password_hash=hash_password(config.mock_password, config.bcrypt_rounds),
        seed=config.mock_seed
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{config.service_name} is starting up...")
        logger.info(f"Environment: {config.environment}")
        logger.info(f"Store backend: {config.store_backend}")
        logger.info(f"API docs available at {config.docs_url}")
        yield
        logger.info(f"{config.service_name} shut down")

    app = FastAPI(
        title=config.service_name,
        description="Backend for a pet-adoption service: users, pets and adoptions",
        version=config.service_version,
        docs_url=config.docs_url,
        debug=config.debug,
        lifespan=lifespan
    )

    app.state.settings = config
    app.state.store = store
    app.state.users_service = users_service
    app.state.pets_service = pets_service
    app.state.adoption_workflow = adoption_workflow
    app.state.mock_generator = mock_generator

    register_exception_handlers(app)
    for router in ROUTERS:
        app.include_router(router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint."""
        return {
            "service": config.service_name,
            "version": config.service_version,
            "status": "running",
            "endpoints": {
                "health": "/health",
                "docs": config.docs_url,
                "users": "/api/users",
                "pets": "/api/pets",
                "adoptions": "/api/adoptions",
                "sessions": "/api/sessions",
                "mocks": "/api/mocks"
            }
        }

    @app.get("/health", include_in_schema=False)
    async def health_check():
        """Health check endpoint."""
        logger.debug("Health check called")
        return {"status": "healthy", "service": "petadopt-api"}

    logger.info("FastAPI app initialized successfully")
    return app


app = create_app()


def main() -> None:
    """Run the API server."""
    import uvicorn

    config = get_settings()
    logger.info(f"Starting {config.service_name} on {config.host}:{config.port}")
    uvicorn.run("petadopt.api:app", host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
