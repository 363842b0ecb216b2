# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path pattern matching for routes.

A pattern is a concatenation of route paths such as '/api/classes/:classSlug'.
Fixed text must match exactly. A dynamic run starts at ':' and extends to the
next '/' (or the end): it matches one or more characters of the candidate
up to the next '/'.

Example:
    >>> match_path('/classes/:classSlug', '/classes/server')
    True
    >>> match_path('/classes/:classSlug', '/classes/server/extra')
    False
"""

from __future__ import annotations

from .exceptions import InvalidArgumentError

DYNAMIC_MARKER = ':'
SEPARATOR = '/'


def is_dynamic(path: str) -> bool:
    """True if path contains a dynamic segment marker."""
    return DYNAMIC_MARKER in path


def strip_trailing_slashes(path: str) -> str:
    """Remove every trailing '/' ('/docs/' -> '/docs', '/' -> '')."""
    return path.rstrip(SEPARATOR)


def _match_segment(pattern: str, candidate: str) -> bool:
    """Compare a single segment (no '/') of pattern and candidate.

    A segment with ':' matches when the candidate starts with the literal
    text before ':' and has at least one more character.
    """
    if DYNAMIC_MARKER not in pattern:
        return pattern == candidate
    prefix = pattern[:pattern.index(DYNAMIC_MARKER)]
    return candidate.startswith(prefix) and len(candidate) > len(prefix)


def match_path(pattern: str, path: str) -> bool:
    """Check whether a concrete path matches a route pattern.

    Args:
        pattern: Route full path, possibly with ':name' segments.
        path: Concrete path to test, without dynamic segments.

    Returns:
        True if every segment matches and both strings are fully consumed.

    Raises:
        InvalidArgumentError: If path itself contains ':'.
    """
    if is_dynamic(path):
        raise InvalidArgumentError(
            f"Cannot match {path}, it needs to be a valid URL with no dynamic segments"
        )
    pattern_parts = pattern.split(SEPARATOR)
    path_parts = path.split(SEPARATOR)
    if len(pattern_parts) != len(path_parts):
        return False
    return all(
        _match_segment(pattern_part, path_part)
        for pattern_part, path_part in zip(pattern_parts, path_parts)
    )
