"""
Custom Exception Classes for AdminKit

This module defines the exceptions raised by the field framework, the
settings store and the admin page, so the HTTP layer can turn them into
consistent error responses.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes exposed in error responses"""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    FIELD_TYPE_UNKNOWN = "FIELD_TYPE_UNKNOWN"
    FIELD_DEFINITION_INVALID = "FIELD_DEFINITION_INVALID"
    SETTINGS_STORE_FAILED = "SETTINGS_STORE_FAILED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class AdminKitError(Exception):
    """Base exception class for all AdminKit exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Field Exceptions
# ============================================================================


class ValidationError(AdminKitError):
    """Raised when a sanitized field value violates its definition"""

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        self.field = field
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=error_details,
            error_code=ErrorCode.VALIDATION_FAILED,
        )


class UnknownFieldTypeError(AdminKitError):
    """Raised when a definition names a field type nobody registered"""

    def __init__(self, field_type: str, field_id: str | None = None):
        details: dict[str, Any] = {"field_type": field_type}
        if field_id:
            details["field"] = field_id
        super().__init__(
            message=f"Unknown field type: {field_type}",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code=ErrorCode.FIELD_TYPE_UNKNOWN,
        )


class FieldDefinitionError(AdminKitError):
    """Raised when a field definition cannot be parsed"""

    def __init__(self, message: str, field_id: str | None = None):
        details = {"field": field_id} if field_id else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code=ErrorCode.FIELD_DEFINITION_INVALID,
        )


# ============================================================================
# Storage & Page Exceptions
# ============================================================================


class SettingsStoreError(AdminKitError):
    """Raised when the settings store cannot persist a mapping"""

    def __init__(self, message: str = "Failed to save settings", location: str | None = None):
        details = {"location": location} if location else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code=ErrorCode.SETTINGS_STORE_FAILED,
        )


class PageNotFoundError(AdminKitError):
    """Raised when no admin page is registered under a slug"""

    def __init__(self, slug: str):
        super().__init__(
            message=f"Settings page '{slug}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"slug": slug},
            error_code=ErrorCode.RESOURCE_NOT_FOUND,
        )
