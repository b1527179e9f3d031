"""Menu data models.

These models represent menu items as stored by the service and returned
over the HTTP API. Incoming payloads are checked by the validation rules
before a MenuItem is built from them.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class MenuCategory(str, Enum):
    """Enumeration of menu categories."""

    ENTREE = "entree"
    APPETIZER = "appetizer"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


class MenuItem(BaseModel):
    """Menu item model."""

    id: int = Field(..., description="Store-assigned identifier", gt=0)
    name: str = Field(..., description="Item name")
    description: str = Field(..., description="Item description")
    price: float = Field(..., description="Item price", ge=0)
    category: MenuCategory = Field(..., description="Menu category")
    ingredients: list[str] = Field(..., description="Ingredients in the item", min_length=1)
    available: bool = Field(..., description="Whether item is currently available")

    @classmethod
    def from_payload(cls, item_id: int, payload: dict[str, Any]) -> "MenuItem":
        """Build a menu item from a validated request payload.

        Only the known fields are taken from the payload, so anything extra
        the client sent is dropped.

        Args:
            item_id: Identifier to assign
            payload: Request body that already passed validation

        Returns:
            MenuItem: New model instance
        """
        return cls(
            id=item_id,
            name=payload["name"],
            description=payload["description"],
            price=payload["price"],
            category=payload["category"],
            ingredients=list(payload["ingredients"]),
            available=payload["available"],
        )


class MenuItemDeletedResponse(BaseModel):
    """Response model for a successful delete."""

    message: str
    menuItem: MenuItem  # noqa: N815
