"""Base service class for domain services."""

from blog.domain.error import ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def _require_text(value: str | None, field: str) -> str:
        """Reject missing or blank text.

        Args:
            value: Caller-supplied text
            field: Field name used in the error message

        Returns:
            The value, unchanged

        Raises:
            ValidationError: If the value is None or blank
        """
        if value is None or not value.strip():
            raise ValidationError(f"{field} must not be empty")
        return value
