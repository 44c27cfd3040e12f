"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InsightsGenerationError(DomainError):
    """Insights could not be produced; the underlying error is the cause."""


INSIGHTS_FAILED = "Failed to generate insights"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def category_name_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def duplicate_category_name(name: str) -> str:
    """Return message for a category name that is already taken."""
    return f"Category '{name}' already exists"


def invalid_period(period: str) -> str:
    """Return message for a malformed period identifier."""
    return f"Invalid period '{period}': expected YYYY-MM"
