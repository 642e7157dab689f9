"""Structured exceptions raised by shortids."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional


class ShortIdsError(Exception):
    """Base exception for all shortids failures."""

    def __init__(self, message: str, error_type: str, details: Dict[str, Any]):
        super().__init__(message)
        self.error_type = error_type
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Return serializable error details."""
        return {
            "error_type": self.error_type,
            "message": str(self),
            "details": self.details,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, indent=2)


class InvalidArgumentError(ShortIdsError, ValueError):
    """Raised when an operation receives an argument it cannot work with."""

    def __init__(self, argument: str, message: str, value: Any = None):
        super().__init__(
            message=message,
            error_type="InvalidArgumentError",
            details={"argument": argument, "value": value},
        )
        self.argument = argument


class ConfigValidationError(ShortIdsError, ValueError):
    """Generator configuration rejected by the schema or the pattern compiler."""

    def __init__(self, code: str, message: str, path: Optional[str] = None):
        super().__init__(
            message=message,
            error_type="ConfigValidationError",
            details={"code": code, "path": path},
        )
        self.code = code
        self.path = path
