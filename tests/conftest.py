"""Shared pytest fixtures and configuration for all tests."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from restaurant_menu_service.handlers.api_handler import create_app
from restaurant_menu_service.models.menu_models import MenuCategory, MenuItem
from restaurant_menu_service.repositories.menu_repository import MenuItemRepository
from restaurant_menu_service.services.menu_service import MenuService


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """Fixture providing a create/update body that passes every rule."""
    return {
        "name": "Tacos",
        "description": "Soft corn tortillas with beef",
        "price": 6.5,
        "category": "entree",
        "ingredients": ["tortilla", "beef"],
        "available": True,
    }


@pytest.fixture
def sample_items() -> list[MenuItem]:
    """Fixture providing three stored menu items with ids 1-3."""
    return [
        MenuItem(
            id=1,
            name="Classic Burger",
            description="Beef patty with lettuce and tomato",
            price=12.99,
            category=MenuCategory.ENTREE,
            ingredients=["beef", "lettuce", "tomato", "bun"],
            available=True,
        ),
        MenuItem(
            id=2,
            name="Mozzarella Sticks",
            description="Crispy breaded mozzarella with marinara",
            price=8.99,
            category=MenuCategory.APPETIZER,
            ingredients=["mozzarella cheese", "breadcrumbs"],
            available=True,
        ),
        MenuItem(
            id=3,
            name="Fresh Lemonade",
            description="House-made lemonade with mint",
            price=3.99,
            category=MenuCategory.BEVERAGE,
            ingredients=["lemons", "sugar", "water"],
            available=False,
        ),
    ]


@pytest.fixture
def repository(sample_items: list[MenuItem]) -> MenuItemRepository:
    """Fixture providing a repository seeded with the sample items."""
    return MenuItemRepository(sample_items)


@pytest.fixture
def menu_service(repository: MenuItemRepository) -> MenuService:
    """Fixture providing a menu service over the seeded repository."""
    return MenuService(repository=repository)


@pytest.fixture
def client(menu_service: MenuService) -> TestClient:
    """Fixture providing a test client for an app built on the seeded repository."""
    return TestClient(create_app(menu_service=menu_service))
