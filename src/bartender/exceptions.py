"""Custom exceptions for bartender."""


class BartenderError(Exception):
    """Base exception for bartender operations."""


class DocsDirNotFoundError(BartenderError):
    """Docs directory is missing or cannot be listed."""


class FrontmatterError(BartenderError):
    """Front matter block could not be read or parsed."""


class OutputWriteError(BartenderError):
    """Generated sidebar could not be written."""
