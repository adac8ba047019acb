"""Custom exceptions for the application."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationFailure:
    """A single field-level validation failure."""

    property_name: str
    message: str


class ValidationError(Exception):
    """Raised (or returned inside an Err) when one or more validation rules fail."""

    def __init__(self, failures: list[ValidationFailure]):
        """
        Initialize the exception.

        Args:
            failures: Every failure collected during one validation pass
        """
        summary = "; ".join(f"{f.property_name}: {f.message}" for f in failures)
        super().__init__(f"Validation failed: {summary}")
        self.failures = list(failures)


class StorageError(Exception):
    """Raised when the backing store cannot complete an operation."""

    def __init__(self, operation: str, entity_name: str):
        """
        Initialize the exception.

        Args:
            operation: Name of the repository operation that failed
            entity_name: Name of the entity the operation targeted
        """
        super().__init__(f"Storage failure during {operation} on {entity_name}")
        self.operation = operation
        self.entity_name = entity_name
