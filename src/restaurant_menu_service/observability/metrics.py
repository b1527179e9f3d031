"""Custom metrics for the menu service."""

from opentelemetry import metrics

meter = metrics.get_meter("menu-svc")

items_created_counter = meter.create_counter(
    name="menu_items_created_total",
    description="Total number of menu items created",
    unit="1",
)

items_updated_counter = meter.create_counter(
    name="menu_items_updated_total",
    description="Total number of menu items replaced by an update",
    unit="1",
)

items_deleted_counter = meter.create_counter(
    name="menu_items_deleted_total",
    description="Total number of menu items deleted",
    unit="1",
)

validation_failure_counter = meter.create_counter(
    name="menu_validation_failures_total",
    description="Total number of rejected create/update payloads by operation",
    unit="1",
)

validation_rule_failures = meter.create_histogram(
    name="menu_validation_rule_failures",
    description="Number of field rules a rejected payload failed",
    unit="1",
)

# Current number of items held in memory
items_in_store = meter.create_up_down_counter(
    name="menu_items_in_store",
    description="Current number of menu items in the store",
    unit="1",
)


def record_item_created() -> None:
    """Record a successful create."""
    items_created_counter.add(1)
    items_in_store.add(1)


def record_item_updated() -> None:
    """Record a successful update."""
    items_updated_counter.add(1)


def record_item_deleted() -> None:
    """Record a successful delete."""
    items_deleted_counter.add(1)
    items_in_store.add(-1)


def record_validation_failure(operation: str, message_count: int) -> None:
    """Record a rejected payload.

    Args:
        operation: The operation that rejected it ("create" or "update")
        message_count: Number of rules the payload failed
    """
    attributes = {"operation": operation}
    validation_failure_counter.add(1, attributes)
    validation_rule_failures.record(message_count, attributes)


def record_store_seeded(item_count: int) -> None:
    """Record the items a store started with.

    Args:
        item_count: Number of seeded items
    """
    items_in_store.add(item_count)
