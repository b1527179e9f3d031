"""Shared dependency factory for the Lambda handler.

Dependencies are created once per Lambda container and reused across warm
invocations. The menu lives in memory, so each container holds its own copy
and it resets on a cold start.
"""

import logging
import os

from fastapi import FastAPI

from restaurant_menu_service.handlers.api_handler import create_app
from restaurant_menu_service.observability import configure_logging
from restaurant_menu_service.repositories.menu_repository import create_menu_repository
from restaurant_menu_service.services.menu_service import MenuService

logger = logging.getLogger(__name__)

# Module-level caches for Lambda container reuse
_menu_service: MenuService | None = None
_fastapi_app: FastAPI | None = None


def get_menu_service() -> MenuService:
    """Create or retrieve the cached menu service.

    Returns:
        Configured MenuService instance
    """
    global _menu_service

    if _menu_service is not None:
        return _menu_service

    repository = create_menu_repository(
        seed_menu=os.getenv("SEED_MENU", "true").lower() == "true"
    )

    _menu_service = MenuService(repository=repository)

    logger.info(f"Menu service initialized with {len(repository)} items")
    return _menu_service


def get_fastapi_app() -> FastAPI:
    """Create or retrieve the cached FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    global _fastapi_app

    if _fastapi_app is not None:
        return _fastapi_app

    _fastapi_app = create_app(menu_service=get_menu_service())

    logger.info("FastAPI application initialized")
    return _fastapi_app


def reset_dependencies() -> None:
    """Drop the cached dependencies so the next call builds fresh ones."""
    global _menu_service, _fastapi_app

    _menu_service = None
    _fastapi_app = None


def initialize_lambda_environment() -> None:
    """Initialize Lambda environment with logging.

    Should be called once during Lambda cold start.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Lambda environment initialized")
