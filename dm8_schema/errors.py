"""Error types for dm8-schema.

Failures raised by the query executor (connectivity, SQL errors,
permissions) are not represented here: they reach the caller unchanged.
"""

from typing import Optional, Dict, Any


class SchemaError(Exception):
    """Base exception for dm8-schema errors."""

    def __init__(self, message: str, code: str = "SCHEMA_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(SchemaError):
    """Connection or schema settings are missing or invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class DriverNotInstalledError(SchemaError):
    """The DM8 database driver could not be imported."""

    def __init__(self, package: str):
        super().__init__(
            f"{package} is required. Install it with: pip install {package}",
            code="DRIVER_NOT_INSTALLED",
            details={"package": package},
        )
