"""Body escaping for the line format.

Only newlines are escaped. A body that already contains a literal backslash
followed by ``n`` cannot be told apart from an escaped newline and decodes to
a newline.
"""

from __future__ import annotations

NEWLINE = "\n"
ESCAPED_NEWLINE = "\\n"


def escape_body(body: str) -> str:
    """Replace every newline with the two characters backslash-n."""
    return body.replace(NEWLINE, ESCAPED_NEWLINE)


def unescape_body(text: str) -> str:
    """Inverse of :func:`escape_body`."""
    return text.replace(ESCAPED_NEWLINE, NEWLINE)
