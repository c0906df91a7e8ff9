"""
Exception classes for the contact submission domain.
"""

from typing import List, Optional


class ConfigurationError(Exception):
    """Raised when required configuration is invalid or missing."""
    pass


class ValidationError(Exception):
    """Raised when a submission is missing required fields."""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing or empty required fields: {', '.join(self.missing_fields)}")


class StoreError(Exception):
    """Raised when a submission cannot be persisted."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.error_code = error_code
        super().__init__(message)


class DispatchError(Exception):
    """Raised when the mail transport rejects or fails to send a message."""

    def __init__(self, message: str, kind: str, recipient: str, error_code: Optional[str] = None):
        self.kind = kind
        self.recipient = recipient
        self.error_code = error_code
        super().__init__(message)
