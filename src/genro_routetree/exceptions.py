# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""RouteTree exceptions."""

from __future__ import annotations


class RouteTreeError(Exception):
    """Base exception for RouteTree errors."""

    pass


class ConflictError(RouteTreeError):
    """Raised when a route is attached to a second parent."""

    pass


class InvalidOperationError(RouteTreeError):
    """Raised when an operation is not allowed on this route (e.g. a child)."""

    pass


class InvalidArgumentError(RouteTreeError, ValueError):
    """Raised when a route query receives an unusable argument."""

    pass
