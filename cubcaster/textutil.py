"""Small text helpers used while reading scene files."""

from __future__ import annotations

from os import PathLike

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Read a leading decimal integer, skipping leading whitespace.

    A '+' is skipped unless a '-' follows it; parsing stops at the first
    non-digit, and text without digits yields 0.
    """
    i = 0
    n = len(text)
    while i < n and text[i] in _SPACES:
        i += 1
    if i < n and text[i] == "+" and text[i + 1:i + 2] != "-":
        i += 1
    sign = 1
    if i < n and text[i] == "-":
        sign = -1
        i += 1
    result = 0
    while i < n and text[i] in _DIGITS:
        result = result * 10 + ord(text[i]) - ord("0")
        i += 1
    return sign * result


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a file, each keeping its trailing newline.

    Only '\\n' ends a line; the last line has no newline if the file does
    not end with one. Errors opening the file propagate as OSError.
    """
    with open(path, "rb") as handle:
        return [raw.decode("utf-8", errors="replace") for raw in handle]