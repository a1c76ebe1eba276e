"""Service-layer error definitions.

These are failures a user can cause and fix: the command was well formed but
does not fit the records as they currently stand.
"""


class CommandError(Exception):
    """Base class for user-facing command failures raised by handlers."""


class PatientIndexOutOfRangeError(CommandError):
    """Raised when a patient index points past the displayed patient list."""

    DEFAULT_MESSAGE = "Patient index {index} is out of range."

    def __init__(self, one_based: int, message: str | None = None) -> None:
        super().__init__((message or self.DEFAULT_MESSAGE).format(index=one_based))
        self.one_based = one_based


class DuplicatePatientError(CommandError):
    """Raised when adding a patient whose IC is already on record."""

    def __init__(self, ic: str) -> None:
        super().__init__("This patient already exists in the records.")
        self.ic = ic
