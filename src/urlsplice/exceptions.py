"""src/urlsplice/exceptions.py

urlsplice Exceptions hierarchy.
"""

from typing import Optional


class URLSpliceError(Exception):
    """Base exception for all urlsplice errors."""


class ParseError(URLSpliceError):
    """
    Base exception for parse failures.

    Attributes:
        text: The input the failing stage was given.
        position: Offset into the original URL where the stage started,
            or None when unknown.
    """

    def __init__(
        self,
        message: str = "Could not parse URL",
        text: str = "",
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.text = text
        self.position = position


class DelimiterNotFound(ParseError):
    """A mandatory literal delimiter is missing from the input."""

    def __init__(
        self,
        delimiter: str,
        text: str = "",
        position: Optional[int] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"Delimiter {delimiter!r} not found"
        super().__init__(message, text=text, position=position)
        self.delimiter = delimiter


class MalformedSegment(ParseError):
    """Reserved for a stage that meets input its grammar cannot handle.

    The built-in stages are total past the scheme delimiter and do not
    raise it.
    """
