"""Component tests running full request flows against the assembled API."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from restaurant_menu_service.handlers.api_handler import create_app
from restaurant_menu_service.models.seed_data import default_menu_items
from restaurant_menu_service.repositories.menu_repository import MenuItemRepository
from restaurant_menu_service.services.menu_service import MenuService

TACOS = {
    "name": "Tacos",
    "description": "Soft corn tortillas with beef",
    "price": 6.5,
    "category": "entree",
    "ingredients": ["tortilla", "beef"],
    "available": True,
}


@pytest.fixture
def api() -> TestClient:
    """Fixture providing a client for an app loaded with the starting menu."""
    repository = MenuItemRepository(default_menu_items())
    return TestClient(create_app(menu_service=MenuService(repository=repository)))


def _menu(api: TestClient) -> list[dict[str, Any]]:
    response = api.get("/api/menus")
    assert response.status_code == 200
    items: list[dict[str, Any]] = response.json()
    return items


@pytest.mark.component
class TestMenuApiFlow:
    """End-to-end request flows over the menu endpoints."""

    def test_create_then_get(self, api: TestClient) -> None:
        """Test that a created item can be read back unchanged."""
        created = api.post("/api/menus", json=TACOS)

        assert created.status_code == 201
        body = created.json()
        assert isinstance(body["id"], int)

        fetched = api.get(f"/api/menus/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == body

    def test_create_grows_menu_by_one_with_unused_id(self, api: TestClient) -> None:
        """Test that a create adds exactly one item with a fresh id."""
        before = _menu(api)

        new_id = api.post("/api/menus", json=TACOS).json()["id"]

        after = _menu(api)
        assert len(after) == len(before) + 1
        assert new_id not in {item["id"] for item in before}
        assert after[:-1] == before

    def test_rejected_update_leaves_item_unchanged(self, api: TestClient) -> None:
        """Test that an invalid category is rejected and the item keeps its values."""
        before = api.get("/api/menus/1").json()

        response = api.put("/api/menus/1", json={**TACOS, "category": "snack"})

        assert response.status_code == 400
        assert (
            "Category must be entree, appetizer, dessert, or beverage"
            in response.json()["messages"]
        )
        assert api.get("/api/menus/1").json() == before

    @pytest.mark.parametrize(
        "changes",
        [{"price": -1}, {"category": "snack"}, {"ingredients": []}, {"name": None}],
    )
    def test_invalid_payloads_never_change_menu(
        self, api: TestClient, changes: dict[str, Any]
    ) -> None:
        """Test that rejected creates and updates leave the menu as it was."""
        before = _menu(api)
        payload = {k: v for k, v in {**TACOS, **changes}.items() if v is not None}

        assert api.post("/api/menus", json=payload).status_code == 400
        assert api.put("/api/menus/2", json=payload).status_code == 400
        assert _menu(api) == before

    def test_update_replaces_whole_record(self, api: TestClient) -> None:
        """Test that an update keeps nothing from the old record but its id."""
        response = api.put(
            "/api/menus/4",
            json={**TACOS, "name": "Flan", "category": "dessert", "available": False},
        )

        assert response.status_code == 200
        assert api.get("/api/menus/4").json() == {
            "id": 4,
            **TACOS,
            "name": "Flan",
            "category": "dessert",
            "available": False,
        }

    def test_delete_keeps_other_items_in_order(self, api: TestClient) -> None:
        """Test that delete removes only the target and keeps the order."""
        before = _menu(api)

        response = api.delete("/api/menus/3")

        assert response.status_code == 200
        assert response.json()["menuItem"] == before[2]
        assert _menu(api) == before[:2] + before[3:]

    def test_repeated_delete_is_not_found(self, api: TestClient) -> None:
        """Test that deleting twice is not found the second time and size stays put."""
        assert api.delete("/api/menus/5").status_code == 200
        size = len(_menu(api))

        for _ in range(2):
            response = api.delete("/api/menus/5")
            assert response.status_code == 404
            assert response.json() == {"error": "Menu item with id 5 not found"}

        assert len(_menu(api)) == size

    def test_unknown_ids_never_change_menu(self, api: TestClient) -> None:
        """Test get, update and delete on an id that is not stored."""
        before = _menu(api)

        assert api.get("/api/menus/404").status_code == 404
        assert api.put("/api/menus/404", json=TACOS).status_code == 404
        assert api.delete("/api/menus/404").status_code == 404
        assert _menu(api) == before

    def test_ids_are_not_reused_after_delete(self, api: TestClient) -> None:
        """Test that a create after deleting the newest item gets a new id."""
        assert api.delete("/api/menus/6").status_code == 200

        new_id = api.post("/api/menus", json=TACOS).json()["id"]

        assert new_id == 7
        ids = [item["id"] for item in _menu(api)]
        assert len(ids) == len(set(ids))

    def test_read_and_write_ids_are_parsed_differently(self, api: TestClient) -> None:
        """Test that a malformed id is not found on reads but rejected on writes."""
        assert api.get("/api/menus/abc").status_code == 404
        assert api.put("/api/menus/abc", json=TACOS).status_code == 400
        assert api.delete("/api/menus/abc").status_code == 400
