"""Errors raised by the menu service and rendered by the API handler."""

from typing import Any


class MenuServiceError(Exception):
    """Base class for errors that map to a client-facing response."""

    status_code: int = 400

    def __init__(self, error: str, messages: list[str] | None = None) -> None:
        super().__init__(error)
        self.error = error
        self.messages = messages

    def to_response_body(self) -> dict[str, Any]:
        """Build the JSON body returned to the client.

        Returns:
            dict: {"error": ...} plus "messages" when there are any
        """
        body: dict[str, Any] = {"error": self.error}
        if self.messages is not None:
            body["messages"] = self.messages
        return body


class MenuValidationError(MenuServiceError):
    """Payload failed one or more field rules."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__("Validation failed", messages)


class InvalidMenuItemIdError(MenuServiceError):
    """Path id is not a positive integer."""

    def __init__(self, raw_id: str) -> None:
        super().__init__("Validation failed", ["ID must be a positive integer"])
        self.raw_id = raw_id


class InvalidRequestBodyError(MenuServiceError):
    """Request body could not be decoded as JSON."""

    def __init__(self) -> None:
        super().__init__("Invalid JSON body")


class MenuItemNotFoundError(MenuServiceError):
    """No menu item matches a well-formed id."""

    status_code = 404

    def __init__(self, error: str) -> None:
        super().__init__(error)
