"""
Exceptions raised while building and querying an application model.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

# Validation errors listed in a message before the rest are summarized
MAX_LISTED_ERRORS = 5


class JavalensError(Exception):
    """Base exception for javalens errors."""

    @staticmethod
    def describe_errors(errors: Sequence[dict[str, Any]]) -> list[str]:
        """Render pydantic error dicts as "location: message" lines."""
        lines = [
            f"  - {'.'.join(map(str, err.get('loc', ())))}: {err.get('msg', 'Unknown error')}"
            for err in errors[:MAX_LISTED_ERRORS]
        ]
        hidden = len(errors) - MAX_LISTED_ERRORS
        if hidden > 0:
            lines.append(f"  ... and {hidden} more errors")
        return lines


class SchemaValidationError(JavalensError):
    """Raised when an analyzer document does not match the schema.

    The build is aborted as a whole; no partially built model is exposed.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize schema validation error.

        Args:
            message: Error message
            errors: Validation errors (from Pydantic)
        """
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, error: ValidationError) -> "SchemaValidationError":
        """Wrap a Pydantic ValidationError."""
        return cls(
            f"Analysis document validation failed: {error.error_count()} errors",
            errors=error.errors(include_url=False),
        )

    @property
    def field_path(self) -> tuple[str | int, ...]:
        """Location of the first failing field, outermost key first."""
        if not self.errors:
            return ()
        return tuple(self.errors[0].get("loc", ()))

    @property
    def location(self) -> str:
        """The first failing field path rendered with dots."""
        return ".".join(str(part) for part in self.field_path)

    def __str__(self) -> str:
        return "\n".join([super().__str__(), *self.describe_errors(self.errors)])


class AnalysisInputError(JavalensError):
    """Raised when an analysis document cannot be read or decoded."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        msg = super().__str__()
        if self.path:
            msg = f"{msg} (file: {self.path})"
        return msg


class NotFoundError(JavalensError, LookupError):
    """Raised when a query names an entity absent from the model."""

    pass


class ClassNotFoundError(NotFoundError):
    """Raised when no compilation unit declares a type."""

    def __init__(self, qualified_name: str) -> None:
        super().__init__(f"Class not found: {qualified_name}")
        self.qualified_name = qualified_name


class MethodNotFoundError(NotFoundError):
    """Raised when a type declares no callable with a signature."""

    def __init__(self, qualified_name: str, signature: str) -> None:
        super().__init__(f"Method not found: {qualified_name}.{signature}")
        self.qualified_name = qualified_name
        self.signature = signature
