"""Exception hierarchy for the tgwire binding layer."""

from typing import Any, Dict, Optional


class TgWireError(Exception):
    """Base class for every error raised by :mod:`tgwire`."""


class UnionDecodeError(TgWireError, ValueError):
    """No candidate of a tag-free union accepted the value.

    Subclasses :class:`ValueError` so that pydantic reports it as a single
    error located at the union field when raised inside model validation.

    Attributes:
        union: Name of the union type, e.g. ``"ReplyMarkup"``.
        value: The raw value that could not be decoded.
    """

    def __init__(self, union: str, value: Any) -> None:
        self.union = union
        self.value = value
        super().__init__(f"no candidate of {union} matched value of type {type(value).__name__}")


class ApiError(TgWireError):
    """The Bot API answered with ``ok: false``.

    Attributes:
        error_code: Error code reported by the API (mirrors the HTTP status).
        description: Human-readable description, when present.
        parameters: Raw ``ResponseParameters`` dict, when present.
    """

    def __init__(
        self,
        error_code: Optional[int],
        description: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.error_code = error_code
        self.description = description or "Unknown error"
        self.parameters = parameters or {}
        super().__init__(f"API error {error_code}: {self.description}")

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before repeating a flood-limited request."""
        return self.parameters.get("retry_after")

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        """New identifier of a group that was migrated to a supergroup."""
        return self.parameters.get("migrate_to_chat_id")
