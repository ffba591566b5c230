"""rfcuri.errors"""

from typing import Any, Self


class InvalidURIError(ValueError):
    """Raised when a URI, a relative reference, or one of their components is malformed.

    `component` names the part that failed ("scheme", "host", "path", ...) when known,
    and `value` holds the rejected input.
    """

    def __init__(self: Self, message: str, component: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.component: str | None = component
        self.value: Any = value
