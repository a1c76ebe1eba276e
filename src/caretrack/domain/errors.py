"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidIndexValueError(DomainError, ValueError):
    """Raised when an index value object is built from an out-of-range integer."""

    def __init__(self, value: int, base: str) -> None:
        super().__init__(f"{base} index must not be below the base, got {value}.")
        self.value = value
        self.base = base


# ============================================================================
#                   Caring session related errors
# ============================================================================


class DuplicateSessionError(DomainError):
    """Raised when a patient already has an overlapping caring session."""

    def __init__(self) -> None:
        super().__init__("Duplicate caring session: same date, time, and care type.")


class SessionIndexOutOfRangeError(DomainError):
    """Raised when a session index does not point into a patient's sessions."""

    def __init__(self, one_based: int) -> None:
        super().__init__(f"Session index {one_based} is out of range.")
        self.one_based = one_based
