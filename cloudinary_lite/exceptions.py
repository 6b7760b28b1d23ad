"""
Error types raised by the URL builder, the URL parser and the upload client.
"""

from typing import Optional


class InvalidValue(ValueError):
    """A value object was constructed with parameters the service cannot accept."""


class ParseError(ValueError):
    """A string could not be turned into an image delivery URL."""


class NotAUrl(ParseError):
    """The input is not an absolute http(s) URL."""


class UnexpectedShape(ParseError):
    """The URL does not point at `res.cloudinary.com/<cloud>/image/upload/`."""


class MissingPath(ParseError):
    """Nothing that could be an asset path follows the upload marker."""


class UploadError(RuntimeError):
    """The upload API answered with an error payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
