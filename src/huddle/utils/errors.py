"""Centralized error handling module."""

from enum import Enum
from typing import Any, Dict, Optional

from .logging import get_logger

_logger = None


def _get_logger():
    """Get logger with lazy initialisation."""
    global _logger
    if _logger is None:
        _logger = get_logger(__name__)
    return _logger


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    VALIDATION = "validation"
    EDITOR = "editor"
    FILE_SYSTEM = "file_system"
    STORAGE = "storage"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


## Custom Exceptions


class HuddleError(Exception):
    """Base exception for all Huddle errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        """Initialise HuddleError with optional message and details."""
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error details to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


## Validation Errors


class ValidationError(HuddleError):
    """Base exception for validation-related errors."""

    category = ErrorCategory.VALIDATION
    user_message = "Invalid input"


class EmptyMessageError(ValidationError):
    """Exception for submissions with neither text nor an image."""

    user_message = "Message is empty"


class InvalidDocumentError(ValidationError):
    """Exception for malformed rich text documents."""

    user_message = "Invalid rich text document"


## Editor Errors


class EditorError(HuddleError):
    """Base exception for editor widget errors."""

    category = ErrorCategory.EDITOR
    user_message = "The editor failed"


class EditorInitError(EditorError):
    """Exception when the editor widget cannot be created."""

    user_message = "Failed to initialise the editor"


## File System Errors


class FileSystemError(HuddleError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


class AttachmentNotFoundError(FileSystemError):
    """Exception when an image to attach does not exist."""

    user_message = "Attachment not found"


class AttachmentReadError(FileSystemError):
    """Exception when an image file exists but cannot be read."""

    user_message = "Attachment could not be read"


class UnsupportedImageTypeError(FileSystemError):
    """Exception when an attachment is not a supported image."""

    user_message = "Unsupported image type"


class AttachmentTooLargeError(FileSystemError):
    """Exception when an attachment exceeds the size limit."""

    user_message = "Attachment is too large"


## Storage Errors


class StorageError(HuddleError):
    """Base exception for message storage errors."""

    category = ErrorCategory.STORAGE
    user_message = "A storage error occurred"


class MessageNotFoundError(StorageError):
    """Exception when a message is not found in the store."""

    user_message = "Message not found"


## Configuration Errors


class ConfigurationError(HuddleError):
    """Base exception for configuration-related errors."""

    category = ErrorCategory.CONFIGURATION
    user_message = "A configuration error occurred"


class MissingConfigError(ConfigurationError):
    """Exception for missing configuration settings."""

    user_message = "Missing configuration settings"


class InvalidConfigError(ConfigurationError):
    """Exception for invalid configuration settings."""

    user_message = "Invalid configuration settings"


## Error Handler


class ErrorHandler:
    """Centralized error handling and logging."""

    @staticmethod
    def handle(
        error: Exception, context: str = "", log_traceback: bool = True
    ) -> Dict[str, Any]:
        """Handle errors with logging and user-friendly message."""
        if isinstance(error, HuddleError):
            _get_logger().error(f"{context}: {error.message}", extra=error.details)
            if log_traceback:
                _get_logger().exception(error)
            return error.to_dict()
        else:
            _get_logger().error(f"{context}: {str(error)}")
            if log_traceback:
                _get_logger().exception(error)
            return {
                "error_type": "UnknownError",
                "category": ErrorCategory.UNKNOWN.value,
                "message": str(error),
                "details": {"context": context},
            }


## Context Manager for Error Handling


class error_context:
    """Context manager that logs an error and optionally suppresses it.

    The caught exception is kept on ``exception`` and its dictionary form
    on ``error``.
    """

    def __init__(
        self,
        context: str = "",
        reraise: bool = True,
    ):
        self.context = context
        self.reraise = reraise
        self.error: Optional[Dict[str, Any]] = None
        self.exception: Optional[BaseException] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        if exc_type is None or not issubclass(exc_type, Exception):
            return False

        self.exception = exc_value
        self.error = ErrorHandler.handle(
            exc_value, self.context, log_traceback=not isinstance(exc_value, HuddleError)
        )

        return not self.reraise


def format_error_message(error: Exception) -> str:
    """Format an error message for display."""
    if isinstance(error, HuddleError):
        return error.message
    else:
        return "An unexpected error occurred - check logs for details."
