"""FastAPI application for the menu API endpoints."""

import json
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from restaurant_menu_service.handlers.request_logger import RequestLoggingMiddleware
from restaurant_menu_service.models.menu_models import MenuItem, MenuItemDeletedResponse
from restaurant_menu_service.services.errors import InvalidRequestBodyError, MenuServiceError
from restaurant_menu_service.services.menu_service import MenuService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


async def read_json_body(request: Request) -> Any:
    """Decode the request body as JSON.

    An empty body reads as an empty object so it fails field validation
    rather than JSON decoding.

    Args:
        request: Incoming request

    Returns:
        The decoded JSON value

    Raises:
        InvalidRequestBodyError: If the body is not valid JSON
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        logger.warning(f"Could not decode request body: {e}")
        raise InvalidRequestBodyError() from e


def create_app(menu_service: MenuService) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        menu_service: Service holding the menu items

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Restaurant Menu API",
        description="CRUD API for the menu items of a restaurant ordering application",
        version="1.0.0",
    )

    # Store the service in app state for access in route handlers
    app.state.menu_service = menu_service

    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(MenuServiceError)
    async def menu_service_error_handler(_request: Request, exc: MenuServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_response_body())

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/api/menus", response_model=list[MenuItem], tags=["Menus"])
    async def list_menu_items() -> list[MenuItem]:
        """List every menu item in insertion order."""
        items: list[MenuItem] = await app.state.menu_service.list_items()
        return items

    @app.get("/api/menus/{menu_id}", response_model=MenuItem, tags=["Menus"])
    async def get_menu_item(menu_id: str) -> MenuItem:
        """Get a menu item by id.

        Args:
            menu_id: The menu item id; anything that does not parse is simply not found

        Returns:
            The matching menu item
        """
        item: MenuItem = await app.state.menu_service.get_item(menu_id)
        return item

    @app.post(
        "/api/menus",
        response_model=MenuItem,
        status_code=status.HTTP_201_CREATED,
        tags=["Menus"],
    )
    async def create_menu_item(request: Request) -> MenuItem:
        """Create a menu item; the id is assigned by the server.

        Returns:
            The stored menu item
        """
        payload = await read_json_body(request)
        item: MenuItem = await app.state.menu_service.create_item(payload)
        return item

    @app.put("/api/menus/{menu_id}", response_model=MenuItem, tags=["Menus"])
    async def update_menu_item(menu_id: str, request: Request) -> MenuItem:
        """Replace a menu item with the request body.

        Args:
            menu_id: The menu item id, must be a positive integer

        Returns:
            The replacement menu item
        """
        payload = await read_json_body(request)
        item: MenuItem = await app.state.menu_service.update_item(menu_id, payload)
        return item

    @app.delete("/api/menus/{menu_id}", response_model=MenuItemDeletedResponse, tags=["Menus"])
    async def delete_menu_item(menu_id: str) -> MenuItemDeletedResponse:
        """Delete a menu item.

        Args:
            menu_id: The menu item id, must be a positive integer

        Returns:
            Confirmation message and the removed item
        """
        item: MenuItem = await app.state.menu_service.delete_item(menu_id)
        return MenuItemDeletedResponse(message="Menu item deleted successfully", menuItem=item)

    return app
