"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

These exceptions define domain-specific errors that can be caught and handled
appropriately at the application boundaries.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RepositoryException(ApplicationException):
    """Base exception for repository/data access errors."""


class ValidationException(ApplicationException):
    """Exception for invalid arguments handed to a repository or service."""


class ResourceNotFoundException(ApplicationException):
    """Exception when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type}"
        if resource_id:
            message += f" with id '{resource_id}'"
        message += " not found"
        super().__init__(message, details)


class ExamNotFoundException(ResourceNotFoundException):
    """Raised when no exam in the catalog carries the requested name."""

    def __init__(self, name: str, details: Optional[dict] = None):
        super().__init__("Exam", details=details or {"name": name})
        self.name = name
        self.message = f"Exam '{name}' not found"
        self.args = (self.message,)


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""
