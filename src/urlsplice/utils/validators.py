"""utils/validators.py

Validation utilities for urlsplice.
"""

from urlsplice.exceptions import ParseError
from urlsplice.url import parse


def is_url(text: str) -> bool:
    """Return True if ``text`` parses as a URL of the supported shape."""
    try:
        parse(text)
    except ParseError:
        return False
    return True
