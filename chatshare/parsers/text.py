"""Text clean-up helpers shared by the parsers."""

from __future__ import annotations

import re

# ECMAScript's whitespace and line-terminator set.  Python's own ``\s`` also
# matches the \x1c-\x1f separators and \x85, and misses the BOM.
_WHITESPACE_CLASS = (
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
)
_WHITESPACE_RUN = re.compile(_WHITESPACE_CLASS + "+")
_TRAILING_WHITESPACE = re.compile(_WHITESPACE_CLASS + "+\\Z")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run in *text* to one space and trim the ends."""
    # After the collapse every leading/trailing run is a single plain space.
    return _WHITESPACE_RUN.sub(" ", text).strip(" ")


def strip_trailing_whitespace(text: str) -> str:
    """Remove whitespace from the end of *text* only, keeping indentation."""
    return _TRAILING_WHITESPACE.sub("", text)
