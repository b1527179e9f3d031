"""Field rules for menu item create and update payloads.

Each rule is a (field, predicate, message) entry. Every rule is checked,
and the messages of all failing rules are returned together.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from restaurant_menu_service.models.menu_models import MenuCategory

_MISSING = object()

VALID_CATEGORIES = frozenset(category.value for category in MenuCategory)


@dataclass(frozen=True)
class FieldRule:
    """A single validation rule.

    Attributes:
        field: Payload key the rule reads
        predicate: Returns True when the value is acceptable
        message: Message reported when the predicate fails
    """

    field: str
    predicate: Callable[[Any], bool]
    message: str


def _min_trimmed_length(minimum: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value.strip()) >= minimum

    return check


def _is_non_negative_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # prices are stored as float; ints too large for one are rejected here
    try:
        as_float = float(value)
    except OverflowError:
        return False
    return math.isfinite(as_float) and value >= 0


def _is_category(value: Any) -> bool:
    return isinstance(value, str) and value in VALID_CATEGORIES


def _is_ingredient_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) >= 1
        and all(isinstance(ingredient, str) for ingredient in value)
    )


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


MENU_ITEM_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", _min_trimmed_length(3), "Name must be at least 3 characters long"),
    FieldRule(
        "description",
        _min_trimmed_length(10),
        "Description must be at least 10 characters long",
    ),
    FieldRule("price", _is_non_negative_number, "Price must be a positive number"),
    FieldRule(
        "category",
        _is_category,
        "Category must be entree, appetizer, dessert, or beverage",
    ),
    FieldRule(
        "ingredients",
        _is_ingredient_list,
        "Ingredients must be an array with at least one item",
    ),
    FieldRule("available", _is_bool, "Available must be true or false"),
)


def validate_menu_item(
    payload: Any, rules: tuple[FieldRule, ...] = MENU_ITEM_RULES
) -> list[str]:
    """Check a create/update payload against the field rules.

    Args:
        payload: Decoded JSON request body; anything other than an object is
            checked as an empty object
        rules: Rules to apply, in reporting order

    Returns:
        list: Messages for every failing rule, empty when the payload is valid
    """
    if not isinstance(payload, dict):
        payload = {}

    messages: list[str] = []
    for rule in rules:
        value = payload.get(rule.field, _MISSING)
        if value is _MISSING or not rule.predicate(value):
            messages.append(rule.message)
    return messages
