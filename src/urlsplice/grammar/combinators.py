"""src/urlsplice/grammar/combinators.py

Small parsing primitives shared by the URL stages.

Every primitive takes the remaining input and returns a tuple of
``(remaining, value)`` where ``remaining`` is the unconsumed suffix.
"""

from typing import Callable, Tuple

from urlsplice.exceptions import DelimiterNotFound

__all__ = ["take_while", "delimited_take", "key_value", "is_key_char", "is_value_char"]


def is_key_char(char: str) -> bool:
    """Characters allowed in a key: alphabetic or a dot."""
    return char.isalpha() or char == "."


def is_value_char(char: str) -> bool:
    """Characters allowed in a value: ASCII letters and digits."""
    return char.isascii() and char.isalnum()


def take_while(predicate: Callable[[str], bool], text: str) -> Tuple[str, str]:
    """
    Take the longest prefix of ``text`` whose characters all satisfy ``predicate``.

    Never fails; the taken prefix may be empty.

    Returns:
        Tuple of (remaining, taken).
    """
    index = 0
    length = len(text)
    while index < length and predicate(text[index]):
        index += 1
    return text[index:], text[:index]


def delimited_take(text: str, delimiter: str) -> Tuple[str, str]:
    """
    Take everything up to ``delimiter`` and consume the delimiter itself.

    Args:
        text: Input to scan.
        delimiter: Literal (possibly multi-character) delimiter.

    Returns:
        Tuple of (remaining after the delimiter, text before the delimiter).

    Raises:
        DelimiterNotFound: If ``delimiter`` does not occur in ``text``.
    """
    index = text.find(delimiter)
    if index == -1:
        raise DelimiterNotFound(delimiter, text=text)
    return text[index + len(delimiter) :], text[:index]


def key_value(text: str, separator: str = ":") -> Tuple[str, Tuple[str, str]]:
    """
    Split ``key[<separator>value]`` off the front of ``text``.

    The key is a run of alphabetic characters and dots. The value is only
    read when the separator immediately follows the key, and is a run of
    ASCII alphanumerics. A missing separator yields an empty value.

    Returns:
        Tuple of (remaining, (key, value)).
    """
    text, key = take_while(is_key_char, text)
    if not text.startswith(separator):
        return text, (key, "")
    text, value = take_while(is_value_char, text[len(separator) :])
    return text, (key, value)
