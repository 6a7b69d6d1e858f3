"""src/urlsplice/grammar/stages.py

Ordered stages of the URL grammar:

    [scheme:]//[user[:password]@]host[:port][/path][?query][#hash]

Each stage receives the input left over by the previous one and returns
``(remaining, extracted)``.
"""

import logging
from typing import Tuple

from urlsplice.grammar.combinators import delimited_take, key_value, take_while

__all__ = [
    "parse_scheme",
    "parse_credentials",
    "parse_host_port",
    "parse_path",
    "parse_query",
    "parse_hash",
]

logger = logging.getLogger(__name__)

SCHEME_DELIMITER = "//"
CREDENTIALS_DELIMITER = "@"
PAIR_SEPARATOR = ":"
PATH_MARKER = "/"
QUERY_MARKER = "?"
HASH_MARKER = "#"
HASH_TERMINATOR = " "

# Characters that end the authority (credentials + host/port) segment.
AUTHORITY_TERMINATORS = PATH_MARKER + QUERY_MARKER + HASH_MARKER


def parse_scheme(text: str) -> Tuple[str, str]:
    """
    Take the scheme token in front of ``//``.

    The returned token still carries its trailing colon (``"https:"``).

    Raises:
        DelimiterNotFound: If ``//`` does not occur in ``text``.
    """
    return delimited_take(text, SCHEME_DELIMITER)


def parse_credentials(text: str) -> Tuple[str, Tuple[str, str]]:
    """
    Take an optional ``user[:password]@`` block.

    Only an ``@`` inside the authority segment counts, i.e. before the
    first ``/``, ``?`` or ``#``; an ``@`` in a query or fragment is not a
    credentials marker. Without one, nothing is consumed and ``("", "")``
    is returned. Characters in the block that the user/password scans
    cannot consume are dropped.
    """
    _, authority = take_while(lambda c: c not in AUTHORITY_TERMINATORS, text)
    if CREDENTIALS_DELIMITER not in authority:
        return text, ("", "")

    text, block = delimited_take(text, CREDENTIALS_DELIMITER)
    dropped, (username, password) = key_value(block, PAIR_SEPARATOR)
    if dropped:
        logger.debug("Dropping text in credentials: %r", dropped)
    return text, (username, password)


def parse_host_port(text: str) -> Tuple[str, Tuple[str, str]]:
    """
    Take ``host[:port]``.

    The next character is peeked, not consumed. Anything the host and
    port scans stop at (a path marker, a digit, a ``-``) is left for the
    path stage, so this stage never fails.
    """
    rest, (host, port) = key_value(text, PAIR_SEPARATOR)
    if rest and rest[0] not in AUTHORITY_TERMINATORS:
        logger.debug("Unscanned host/port text left for path: %r", rest)
    return rest, (host, port)


def parse_path(text: str) -> Tuple[str, str]:
    """Take everything before the first ``?`` or ``#``."""
    return take_while(lambda c: c not in QUERY_MARKER + HASH_MARKER, text)


def parse_query(text: str) -> Tuple[str, str]:
    """Take ``?...`` up to the first ``#``; empty when there is no query."""
    if not text.startswith(QUERY_MARKER):
        return text, ""
    return take_while(lambda c: c != HASH_MARKER, text)


def parse_hash(text: str) -> Tuple[str, str]:
    """Take ``#...`` up to the first space; empty when there is no hash."""
    if not text.startswith(HASH_MARKER):
        return text, ""
    return take_while(lambda c: c != HASH_TERMINATOR, text)
