# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Router - the pathless root of a navigation tree."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from .defaults import DEFAULT_ROUTES
from .definition import RouteDefinition, load_definitions
from .route import Route, RouteCallback

logger = logging.getLogger(__name__)


class Router(Route):
    """Root route built from an ordered list of definitions.

    The router has no name, label or path of its own and is the only route
    allowed to hold active_path.

    Example:
        >>> router = Router([
        ...     {'name': 'docs', 'label': 'Docs', 'routes': [
        ...         {'name': 'intro', 'label': 'Introduction'},
        ...     ]},
        ... ])
        >>> router.active_path = '/docs/intro/'
        >>> router.active_page.full_name
        'docs.intro'
    """

    def __init__(
        self,
        definitions: Iterable[RouteDefinition | Mapping[str, Any]] | None = None,
        on_new_route: RouteCallback | None = None,
    ) -> None:
        """Initialize a Router.

        Args:
            definitions: Top level route definitions, in navigation order.
                If None, DEFAULT_ROUTES is used.
            on_new_route: Optional listener registered before building, so
                it receives every route of the tree in pre-order.
        """
        super().__init__(name='', label='', path='')
        if on_new_route is not None:
            self.on_new_route(on_new_route)
        if definitions is None:
            definitions = DEFAULT_ROUTES
        for definition in load_definitions(definitions):
            self.add(definition)
        logger.debug("Router built with %d pages", len(self.pages))

    def __repr__(self) -> str:
        return f"Router({[route.name for route in self]})"
