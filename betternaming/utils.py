# File: betternaming/utils.py
"""
betternaming - String Primitives
=================================
Case-conversion and hashing helpers shared by the default and readable naming
strategies.

Performance strategy:
- The case-conversion functions are decorated with ``@lru_cache(maxsize=4096)``;
  a schema reuses the same handful of identifiers many times over, so repeated
  calls are amortised to O(1) after first invocation.
- All character classes are ASCII; results never depend on the process locale.

Non-string input is not coerced: the ``re`` calls raise ``TypeError``.
"""

from __future__ import annotations

import functools
import hashlib
import logging
import re
from typing import List

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("betternaming.utils")

# ---------------------------------------------------------------------------
# Pre-compiled regex patterns (compiled once at module load)
# ---------------------------------------------------------------------------

# ABc -> A_Bc
_ACRONYM_BOUNDARY_RE: re.Pattern[str] = re.compile(r"([A-Z])([A-Z])([a-z])")
# aC -> a_C
_LOWER_UPPER_BOUNDARY_RE: re.Pattern[str] = re.compile(r"([a-z0-9])([A-Z])")
_CAMEL_SEPARATOR_RE: re.Pattern[str] = re.compile(r"^([A-Z])|[\s\-_](\w)")
_TITLE_WORD_RE: re.Pattern[str] = re.compile(r"\w\S*")


# ---------------------------------------------------------------------------
# Cached string transformation functions
# ---------------------------------------------------------------------------


@functools.lru_cache(maxsize=4096)
def to_snake_case(name: str) -> str:
    """
    Convert a mixed/camel identifier to lower-case, underscore-delimited form.

    Examples:
        >>> to_snake_case("createdAt")
        'created_at'
        >>> to_snake_case("TestTableName")
        'test_table_name'
        >>> to_snake_case("HTMLParser")
        'html_parser'
        >>> to_snake_case("testPrefix1")
        'test_prefix1'

    Only upper/lower transition points are touched: existing underscores,
    dots and spaces pass through unchanged, and the function is idempotent.
    """
    s: str = _ACRONYM_BOUNDARY_RE.sub(r"\1_\2\3", name)
    s = _LOWER_UPPER_BOUNDARY_RE.sub(r"\1_\2", s)
    return s.lower()


def _camel_replace(match: re.Match[str]) -> str:
    if match.group(2):
        return match.group(2).upper()
    return match.group(1).lower()


@functools.lru_cache(maxsize=4096)
def to_camel_case(name: str) -> str:
    """
    Convert a separated identifier to camelCase.

    Examples:
        >>> to_camel_case("user_id")
        'userId'
        >>> to_camel_case("Author_Id")
        'authorId'

    A leading capital is lowered; whitespace, ``-`` and ``_`` are dropped and
    the following word character is upper-cased.
    """
    return _CAMEL_SEPARATOR_RE.sub(_camel_replace, name)


@functools.lru_cache(maxsize=4096)
def to_title_case(text: str) -> str:
    """
    Upper-case the first character of every word and lower-case the rest.

    Examples:
        >>> to_title_case("name")
        'Name'
        >>> to_title_case("createdAt")
        'Createdat'
    """
    return _TITLE_WORD_RE.sub(
        lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text
    )


# ---------------------------------------------------------------------------
# Checksum
# ---------------------------------------------------------------------------


def sha1_hex(content: str) -> str:
    """Return the SHA-1 hex digest of a UTF-8 encoded string. O(n)."""
    return hashlib.sha1(content.encode("utf-8")).hexdigest()


# ---------------------------------------------------------------------------
# Module-level exports
# ---------------------------------------------------------------------------

__all__: List[str] = [
    "to_snake_case",
    "to_camel_case",
    "to_title_case",
    "sha1_hex",
]

logger.debug("betternaming.utils loaded: %d public symbols.", len(__all__))
