# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-RouteTree - Hierarchical route and navigation registry.

A lightweight, zero-dependency library that builds a tree of named, labeled
routes from nested definitions, with path matching, page navigation and
structural queries (Genro Kyō).
"""

__version__ = "0.1.0"

from .defaults import DEFAULT_ROUTES
from .definition import RouteDefinition, load_definitions
from .exceptions import (
    ConflictError,
    InvalidArgumentError,
    InvalidOperationError,
    RouteTreeError,
)
from .matching import match_path
from .route import Route
from .router import Router

__all__ = [
    # Core classes
    "Route",
    "Router",
    # Definitions
    "RouteDefinition",
    "load_definitions",
    "DEFAULT_ROUTES",
    # Matching
    "match_path",
    # Exceptions
    "RouteTreeError",
    "ConflictError",
    "InvalidOperationError",
    "InvalidArgumentError",
]
