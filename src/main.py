"""Main application entry point for the restaurant menu service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from restaurant_menu_service.handlers.api_handler import create_app
from restaurant_menu_service.observability import configure_logging, setup_observability
from restaurant_menu_service.repositories.menu_repository import create_menu_repository
from restaurant_menu_service.services.menu_service import MenuService

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def env_flag(name: str, default: str) -> bool:
    """Read a true/false environment variable.

    Args:
        name: Variable name
        default: Value used when the variable is unset

    Returns:
        True when the value is "true" (case-insensitive)
    """
    return os.getenv(name, default).lower() == "true"


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Creates the in-memory repository
    3. Creates the menu service
    4. Creates the FastAPI app with the menu endpoints
    5. Sets up observability when enabled

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing restaurant menu service...")

    repository = create_menu_repository(seed_menu=env_flag("SEED_MENU", "true"))
    menu_service = MenuService(repository=repository)

    app = create_app(menu_service=menu_service)

    if env_flag("ENABLE_OBSERVABILITY", "false"):
        setup_observability(app)

    logger.info("Restaurant menu service initialized successfully")

    return app


app = create_application()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Menu API running at http://localhost:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
