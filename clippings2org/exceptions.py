"""Exceptions for the clippings2org application."""


class Clippings2OrgError(Exception):
    """Base class for all application errors."""

    pass


class MalformedRecordError(Clippings2OrgError):
    """Error raised when the parser loses track of record boundaries."""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class MissingSourceError(Clippings2OrgError):
    """Error raised when the clippings file does not exist or cannot be read."""

    pass


class ValidationError(Clippings2OrgError):
    """Error raised when validation fails."""

    pass
