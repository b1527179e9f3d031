"""Menu service implementing the CRUD operations over the item repository."""

import logging
import re
from typing import Any

from restaurant_menu_service.models.menu_models import MenuItem
from restaurant_menu_service.observability import metrics, traced
from restaurant_menu_service.repositories.menu_repository import MenuItemRepository
from restaurant_menu_service.services.errors import (
    InvalidMenuItemIdError,
    MenuItemNotFoundError,
    MenuValidationError,
)
from restaurant_menu_service.services.validation import validate_menu_item

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_POSITIVE_INT = re.compile(r"[0-9]+")


def parse_lenient_id(raw_id: str) -> int | None:
    """Parse the leading integer of a path id, ignoring anything after it.

    Used by the read operations, where an unparseable id simply matches
    nothing: "3abc" reads as 3, "abc" reads as None. A number too long for
    int() also reads as None, since no stored id can be that large.

    Args:
        raw_id: Path segment as received

    Returns:
        int if the segment starts with a usable integer, None otherwise
    """
    match = _LEADING_INT.match(raw_id)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def parse_strict_id(raw_id: str) -> int | None:
    """Parse a path id that must be a positive base-10 integer.

    Used by the write operations, which reject malformed ids before lookup.

    Args:
        raw_id: Path segment as received

    Returns:
        int: The parsed id, or None for a well-formed id too long for int(),
        which cannot match any stored item

    Raises:
        InvalidMenuItemIdError: If the segment is not an integer >= 1
    """
    if not _POSITIVE_INT.fullmatch(raw_id) or not raw_id.lstrip("0"):
        raise InvalidMenuItemIdError(raw_id)
    try:
        return int(raw_id)
    except ValueError:
        return None


class MenuService:
    """Service for reading and changing menu items.

    Each operation runs to completion without awaiting, so a lookup and the
    write that follows it cannot interleave with another request on the
    event loop.
    """

    def __init__(self, repository: MenuItemRepository) -> None:
        """Initialize the MenuService.

        Args:
            repository: Repository holding the menu items
        """
        self.repository = repository

    @traced("menu.list_items")
    async def list_items(self) -> list[MenuItem]:
        """Return every menu item in insertion order."""
        return self.repository.list_items()

    @traced("menu.get_item")
    async def get_item(self, raw_id: str) -> MenuItem:
        """Return a single menu item.

        Args:
            raw_id: Path id, parsed leniently

        Returns:
            MenuItem: The matching item

        Raises:
            MenuItemNotFoundError: If the id does not parse or matches nothing
        """
        item_id = parse_lenient_id(raw_id)
        item = self.repository.find_by_id(item_id) if item_id is not None else None
        if item is None:
            raise MenuItemNotFoundError("Menu not found ")
        return item

    @traced("menu.create_item")
    async def create_item(self, payload: Any) -> MenuItem:
        """Validate a payload and add it as a new menu item.

        Args:
            payload: Decoded request body

        Returns:
            MenuItem: The stored item with its assigned id

        Raises:
            MenuValidationError: If any field rule fails; nothing is stored
        """
        self._validate(payload, operation="create")

        item = MenuItem.from_payload(self.repository.next_id(), payload)
        self.repository.append(item)
        metrics.record_item_created()

        logger.info(f"Created menu item {item.id} ({item.name})")
        return item

    @traced("menu.update_item")
    async def update_item(self, raw_id: str, payload: Any) -> MenuItem:
        """Replace a menu item wholesale with a new payload.

        Fields left out of the payload are not carried over from the old
        record; such a payload fails validation instead.

        Args:
            raw_id: Path id, parsed strictly
            payload: Decoded request body

        Returns:
            MenuItem: The replacement item, keeping the path id

        Raises:
            InvalidMenuItemIdError: If the id is not a positive integer
            MenuValidationError: If any field rule fails
            MenuItemNotFoundError: If no item has that id
        """
        item_id = parse_strict_id(raw_id)
        self._validate(payload, operation="update")

        index = self.repository.index_by_id(item_id) if item_id is not None else None
        if item_id is None or index is None:
            raise MenuItemNotFoundError("Menu item not found")

        item = MenuItem.from_payload(item_id, payload)
        self.repository.replace_at(index, item)
        metrics.record_item_updated()

        logger.info(f"Updated menu item {item_id}")
        return item

    @traced("menu.delete_item")
    async def delete_item(self, raw_id: str) -> MenuItem:
        """Remove a menu item.

        Args:
            raw_id: Path id, parsed strictly

        Returns:
            MenuItem: The removed item

        Raises:
            InvalidMenuItemIdError: If the id is not a positive integer
            MenuItemNotFoundError: If no item has that id
        """
        item_id = parse_strict_id(raw_id)

        index = self.repository.index_by_id(item_id) if item_id is not None else None
        if item_id is None or index is None:
            # raw digits without leading zeros read the same as str(item_id)
            raise MenuItemNotFoundError(f"Menu item with id {raw_id.lstrip('0')} not found")

        item = self.repository.remove_at(index)
        metrics.record_item_deleted()

        logger.info(f"Deleted menu item {item_id}")
        return item

    def _validate(self, payload: Any, operation: str) -> None:
        messages = validate_menu_item(payload)
        if messages:
            metrics.record_validation_failure(operation, len(messages))
            logger.warning(f"Rejected {operation} payload: {'; '.join(messages)}")
            raise MenuValidationError(messages)
