"""
Exceptions for smsencoding library.

Carries the offending argument along with the error for easier debugging.
"""

from typing import Any, Optional


class SMSEncodingError(Exception):
    """
    Base exception for SMS encoding errors.

    All smsencoding exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Any = None
    ) -> None:
        """
        Initialize exception with context.

        Args:
            message: Error description
            argument: Name of the argument that caused the error (if applicable)
            value: Offending value (if applicable)
        """
        self.argument = argument
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with context."""
        parts = [super().__str__()]

        if self.argument:
            parts.append(f"Argument: {self.argument}")

        if self.argument and self.value is not None:
            parts.append(f"Value: {self.value!r}")

        return " | ".join(parts)


class InvalidArgumentError(SMSEncodingError, TypeError):
    """
    Raised when a message text argument is missing or not a string.

    This indicates:
    - None passed instead of a message text
    - bytes or another non-str object passed as text
    """
    pass
