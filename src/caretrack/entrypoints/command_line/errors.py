"""Errors raised while turning command text into commands.

Every error carries the message shown to the user. Field errors are distinct
classes so callers (and tests) can tell, say, a malformed date from a date in
the past even where the wording is similar.
"""


class ParseError(Exception):
    """Base class for errors in user-typed command text."""


class InvalidCommandFormatError(ParseError):
    """Raised when a command's overall shape is wrong (token count, missing fields)."""

    def __init__(self, usage: str) -> None:
        super().__init__(f"Invalid command format!\n{usage}")
        self.usage = usage


class UnknownCommandError(ParseError):
    """Raised when the command word is not recognised."""

    def __init__(self, command_word: str) -> None:
        super().__init__("Unknown command")
        self.command_word = command_word


class InvalidIndexError(ParseError):
    """Raised when an index token is not a positive integer."""

    def __init__(self, text: str) -> None:
        super().__init__("Index is not a non-zero unsigned integer.")
        self.text = text


# --- caring session fields ---


class InvalidDateFormatError(ParseError):
    """Raised when a date matches none of the accepted formats."""

    def __init__(self, text: str) -> None:
        super().__init__(
            "Date must be in YYYY-MM-DD or DD-MM-YYYY format and not in the past"
        )
        self.text = text


class PastDateError(ParseError):
    """Raised when a well-formed date lies before today."""

    def __init__(self, text: str) -> None:
        super().__init__("Cannot schedule sessions in the past")
        self.text = text


class InvalidTimeFormatError(ParseError):
    """Raised when a time matches none of the accepted formats."""

    def __init__(self, text: str) -> None:
        super().__init__("Time must be in HH:MM format or 12-hour format with am/pm")
        self.text = text


class CareTypeLengthError(ParseError):
    """Raised when a care type is empty or longer than allowed."""

    def __init__(self, text: str) -> None:
        super().__init__("Care type must be 1-50 characters")
        self.text = text


class CareTypeCharsetError(ParseError):
    """Raised when a care type contains disallowed characters."""

    def __init__(self, text: str) -> None:
        super().__init__(
            "Care type can only contain letters, numbers, spaces, and hyphens"
        )
        self.text = text


class NotesLengthError(ParseError):
    """Raised when session notes are longer than allowed."""

    def __init__(self, length: int) -> None:
        super().__init__("Notes cannot exceed 200 characters.")
        self.length = length


# --- patient fields ---


class InvalidNameError(ParseError):
    """Raised when a patient name is empty, too long or has odd characters."""

    def __init__(self, text: str) -> None:
        super().__init__(
            "Names should only contain letters, spaces, apostrophes, hyphens and "
            "full stops, and should not be blank"
        )
        self.text = text


class InvalidIcError(ParseError):
    """Raised when an identity-card number is malformed."""

    def __init__(self, text: str) -> None:
        super().__init__(
            "IC should be a letter, followed by 7 digits, followed by a letter "
            "(e.g. S1234567A)"
        )
        self.text = text


class InvalidWardError(ParseError):
    """Raised when a ward label is malformed."""

    def __init__(self, text: str) -> None:
        super().__init__(
            "Ward should be 1-20 characters of letters, digits and hyphens"
        )
        self.text = text
