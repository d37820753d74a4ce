"""Percent-encoding of identifier path segments."""

import re
from urllib.parse import quote_plus, unquote_plus

_ESCAPE = re.compile(r"%[0-9A-F]{2}")


def encode_path_segment(segment: str) -> str:
    """Encode a single path segment with application/x-www-form-urlencoded rules.

    Spaces become ``+`` and every reserved character is escaped, so Matrix
    identifiers such as ``!room:example.org`` or ``$event`` can be placed in a
    path verbatim afterwards.

    A segment that is already in encoded form is returned as is, so a value
    that went through this function once is not encoded a second time. The
    same applies to raw text that happens to look encoded: ``"%21x"`` is
    returned unchanged and decodes to ``"!x"``, not to itself.

    Examples:
        >>> encode_path_segment("!r:matrix.org")
        '%21r%3Amatrix.org'
        >>> encode_path_segment("$x y")
        '%24x+y'
        >>> encode_path_segment("%24x+y")
        '%24x+y'
    """
    if _is_encoded(segment):
        return segment
    return quote_plus(segment, safe="")


def decode_path_segment(segment: str) -> str:
    return unquote_plus(segment)


def _is_encoded(segment: str) -> bool:
    # Requires at least one escape: plain text with a literal "+" is not encoded.
    if not _ESCAPE.search(segment):
        return False
    return quote_plus(unquote_plus(segment), safe="") == segment
