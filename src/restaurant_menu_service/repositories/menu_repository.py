"""In-memory repository for menu items.

The repository owns the ordered list of menu items and the id counter. It
does no validation of its own; callers validate before writing. Following
the pattern used across the services, expected misses return None rather
than raising.
"""

import logging
from collections.abc import Iterable

from restaurant_menu_service.models.menu_models import MenuItem
from restaurant_menu_service.models.seed_data import default_menu_items
from restaurant_menu_service.observability import metrics

logger = logging.getLogger(__name__)


class MenuItemRepository:
    """Repository for menu item CRUD primitives.

    Items are kept in insertion order. Ids come from a counter that only moves
    forward, so an id freed by a delete is never handed out again.
    """

    def __init__(self, items: Iterable[MenuItem] | None = None) -> None:
        """Initialize repository.

        Args:
            items: Optional starting items, already carrying their ids
        """
        self._items: list[MenuItem] = list(items or [])
        self._last_id = max((item.id for item in self._items), default=0)

    def __len__(self) -> int:
        return len(self._items)

    def count(self) -> int:
        """Return the number of stored items."""
        return len(self._items)

    def list_items(self) -> list[MenuItem]:
        """List all items in insertion order.

        Returns:
            list: A new list; later writes to the repository are not reflected in it
        """
        return list(self._items)

    def find_by_id(self, item_id: int) -> MenuItem | None:
        """Retrieve an item by id.

        Args:
            item_id: Menu item identifier

        Returns:
            MenuItem if found, None otherwise
        """
        index = self.index_by_id(item_id)
        return None if index is None else self._items[index]

    def index_by_id(self, item_id: int) -> int | None:
        """Locate the position of an item by id.

        Args:
            item_id: Menu item identifier

        Returns:
            int: Position in the list if found, None otherwise
        """
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def next_id(self) -> int:
        """Allocate the next unused id.

        Returns:
            int: An id greater than every id this repository has seen
        """
        self._last_id += 1
        return self._last_id

    def append(self, item: MenuItem) -> None:
        """Add an item at the end of the list.

        Args:
            item: Item with its id already assigned
        """
        self._items.append(item)
        self._last_id = max(self._last_id, item.id)
        logger.debug(f"Appended menu item {item.id}, store size {len(self._items)}")

    def replace_at(self, index: int, item: MenuItem) -> None:
        """Replace the item at a position.

        Args:
            index: Position returned by index_by_id
            item: Replacement item
        """
        self._items[index] = item

    def remove_at(self, index: int) -> MenuItem:
        """Remove and return the item at a position.

        Args:
            index: Position returned by index_by_id

        Returns:
            MenuItem: The removed item
        """
        return self._items.pop(index)


def create_menu_repository(seed_menu: bool = True) -> MenuItemRepository:
    """Create the repository an application starts with.

    Args:
        seed_menu: Load the starting menu; otherwise start empty

    Returns:
        MenuItemRepository with the in-store item gauge set to its size
    """
    if not seed_menu:
        logger.info("Menu repository starting empty")
        return MenuItemRepository()

    repository = MenuItemRepository(default_menu_items())
    metrics.record_store_seeded(len(repository))
    logger.info(f"Menu repository seeded with {len(repository)} items")
    return repository
