"""Slug validation for browse path segments.

Segments are validated before any content API call so malformed input
never reaches the backend.
"""

import re

from govfront.core.types import Slug

# Letters, digits, hyphen and slash; nothing else survives into an API call
SLUG_PATTERN = re.compile(r"[A-Za-z0-9\-/]+")


def is_valid_slug(value: str | bytes) -> bool:
    """Check whether a raw path segment is an acceptable slug.

    Args:
        value: Path segment as received. Bytes are decoded as strict UTF-8.
               Strings carrying lone surrogates (from surrogateescape
               decoding of invalid bytes) are rejected.

    Returns:
        True if the segment is well-formed UTF-8 and only contains
        allowed characters
    """
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            return False
    else:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return False

    return SLUG_PATTERN.fullmatch(value) is not None


def validate_slugs(*values: str | bytes) -> bool:
    """Return True only if every supplied segment is a valid slug."""
    return all(is_valid_slug(value) for value in values)


def join_slugs(section: str, sub_section: str) -> Slug:
    """Build the tag slug of a sub-section from its path segments."""
    return Slug(f"{section}/{sub_section}")
