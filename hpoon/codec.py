"""
Line codec for the mark store file.

Each mark is one line of text::

    <key>/<base64(path)>

Only the path is base64 encoded, so paths containing the separator, line
breaks, or bytes that are not valid UTF-8 survive a round trip while the key
side stays readable in a diff. The reserved key ``_`` holds the last unnamed
mark.
"""

from __future__ import annotations

import base64
import binascii

from hpoon.exceptions import InvalidMarkName, LineDecodeError, MalformedLine

__all__ = ["LAST_MARKED_KEY", "SEPARATOR", "decode_line", "encode_line"]

LAST_MARKED_KEY = "_"
SEPARATOR = "/"

# surrogateescape keeps undecodable filesystem bytes intact (see os.fsencode).
_PATH_ENCODING = "utf-8"
_PATH_ERRORS = "surrogateescape"


def encode_line(key: str, path: str) -> str:
    """Return the store line for ``key`` without a trailing newline."""

    if SEPARATOR in key or "\n" in key or "\r" in key:
        raise InvalidMarkName(key, f"must not contain {SEPARATOR!r} or line breaks")
    encoded = base64.b64encode(path.encode(_PATH_ENCODING, _PATH_ERRORS)).decode("ascii")
    return f"{key}{SEPARATOR}{encoded}"


def decode_line(line: str) -> tuple[str, str]:
    """Split a store line back into ``(key, path)``.

    Keys never contain the separator, so only the first one splits; the
    standard base64 alphabet includes ``/`` as well.

    Raises ``MalformedLine`` when the line holds no separator
    and ``LineDecodeError`` when the value is not strict base64.
    """

    parts = line.split(SEPARATOR, 1)
    if len(parts) != 2:
        raise MalformedLine(line)
    key, value = parts
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise LineDecodeError(line) from exc
    return key, raw.decode(_PATH_ENCODING, _PATH_ERRORS)
