"""
Custom exception classes for the community app.

Raised while building profile panels from raw play, achievement and award
rows so callers get a specific error instead of a bare KeyError or
AttributeError.
"""


class CommunityBaseException(Exception):
    """Base exception class for all community app exceptions."""
    pass


class InvalidRecordError(CommunityBaseException):
    """Raised when a raw row cannot be turned into a typed record."""

    def __init__(self, message="Invalid record", record=None, key=None):
        self.record = record
        self.key = key
        super().__init__(message)


class SystemNotFoundError(CommunityBaseException):
    """Raised when a game references a console with no System row."""

    def __init__(self, console_id=None):
        self.console_id = console_id
        message = f"System not found: {console_id}" if console_id is not None else "System not found"
        super().__init__(message)
