"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidInputError(DomainError, ValueError):
    """Raised when an operation is given a value it cannot accept.

    Always raised before any state is mutated.
    """

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


# ============================================================================
#                           Status related errors
# ============================================================================


class InvalidStatusError(InvalidInputError):
    """Raised when a status is not one of the available statuses."""

    def __init__(self, status: str, available_statuses: tuple[str, ...]) -> None:
        super().__init__(
            f"Invalid status: {status!r} (available: {', '.join(available_statuses)})",
            status,
        )
        self.status = status
        self.available_statuses = available_statuses


class EmptyStatusesError(InvalidInputError):
    """Raised when a list of available statuses is missing or empty."""

    def __init__(self, statuses: object) -> None:
        if isinstance(statuses, str) and statuses:
            message = (
                "Available statuses must be a list, "
                f"not a single string: {statuses!r}"
            )
        elif statuses:
            message = f"Statuses cannot be empty strings: {statuses!r}"
        else:
            message = f"Available statuses cannot be empty: {statuses!r}"
        super().__init__(message, statuses)


# ============================================================================
#                           Event bus related errors
# ============================================================================


class BubbleCycleError(DomainError):
    """Raised when bubbling to a bus would route events back to their source."""

    def __init__(self) -> None:
        super().__init__("Cannot bubble to a bus that already bubbles into this one.")
