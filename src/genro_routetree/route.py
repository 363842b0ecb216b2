# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Route - a node of the navigation tree.

Each Route has an identity (name, label), its own path segment, arbitrary
metadata and an ordered list of child routes. Full names and full paths are
derived from the position in the tree every time they are read.

Key Features:
    - **Derived identity**: full_name ('docs.main-concepts.database') and
      full_path ('/docs/main-concepts/database')
    - **Dynamic segments**: paths like '/classes/:classSlug'
    - **Pages**: leaf routes in depth-first definition order, with
      previous/next navigation around the active page
    - **Queries**: find(), has(), router_for(), walk()
    - **Notifications**: one on_new_route listener per route, fired for
      every route attached below it

Example:
    >>> docs = Route('docs', 'Documentation', '/docs')
    >>> intro = docs.add({'name': 'intro', 'label': 'Introduction'})
    >>> intro.full_name
    'docs.intro'
    >>> intro.full_path
    '/docs/intro'
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Mapping

from .definition import RouteDefinition, as_definition
from .exceptions import ConflictError, InvalidArgumentError, InvalidOperationError
from .matching import is_dynamic, match_path, strip_trailing_slashes

logger = logging.getLogger(__name__)

RouteCallback = Callable[['Route'], Any]

SEARCH_FIELDS = ('label', 'name', 'full_name', 'path', 'full_path')


class Route:
    """A node in a navigation tree.

    Attributes:
        name: Identifier, joined with dots into full_name.
        label: Human readable title.
        path: This route's own path segment.
        meta: Arbitrary metadata.
        parent: The route containing this one, or None for a root.
    """

    __slots__ = (
        'name', 'label', 'path', 'meta', '_parent', '_children',
        '_active_path', '_on_new_route',
    )

    def __init__(
        self,
        name: str = '',
        label: str = '',
        path: str = '',
        meta: Mapping[str, Any] | None = None,
        parent: Route | None = None,
        children: list[Route] | None = None,
    ) -> None:
        """Initialize a Route.

        Args:
            name: Identifier of the route.
            label: Human readable title.
            path: Own path segment (e.g. '/docs' or '/:slug').
            meta: Optional metadata; copied into a new dict.
            parent: Optional route to attach to.
            children: Optional routes to attach, in order. Route
                definitions call this list 'routes'; on a live Route it is
                'children'. Every child is checked before any is attached.

        Raises:
            ConflictError: If a child already belongs to another route.
                No child is attached in that case.
        """
        self.name = name
        self.label = label
        self.path = path
        self.meta: dict[str, Any] = dict(meta or {})
        self._parent: Route | None = None
        self._children: list[Route] = []
        self._active_path: str | None = None
        self._on_new_route: RouteCallback | None = None

        children = list(children or ())
        for child in children:
            self._check_attach(child)
        for child in children:
            self._attach(child)

        if parent is not None:
            self.parent = parent

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Route({self.full_name!r}, path={self.full_path!r})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._children)

    def __bool__(self) -> bool:
        """A route is truthy even without children."""
        return True

    def __iter__(self) -> Iterator[Route]:
        """Iterate over direct children in definition order."""
        return iter(self._children)

    def __contains__(self, name: str) -> bool:
        """Check if a dotted name exists below this route.

        Args:
            name: Name relative to this route ('getting-started.overview').
        """
        current = self
        for part in name.split('.'):
            current = next((c for c in current._children if c.name == part), None)
            if current is None:
                return False
        return True

    # ==================== Tree Structure ====================

    @property
    def parent(self) -> Route | None:
        """The route containing this one."""
        return self._parent

    @parent.setter
    def parent(self, parent: Route) -> None:
        parent._attach(self)

    @property
    def children(self) -> list[Route]:
        """Direct children in definition order (a copy)."""
        return list(self._children)

    @property
    def _display_name(self) -> str:
        """full_name, or '<root>' for an unnamed root."""
        return self.full_name or '<root>'

    def _check_attach(self, child: Route) -> None:
        """Verify child can be appended to this route, without changing it.

        Raises:
            ConflictError: If child already belongs to another route, or
                if child is this route or one of its ancestors.
        """
        if child._parent is not None and child._parent is not self:
            logger.debug(
                "Rejected %r: already attached to %r", child, child._parent
            )
            raise ConflictError(
                f"Cannot add {child._display_name} to {self._display_name}, "
                f"because it already belongs to {child._parent._display_name}"
            )
        ancestor: Route | None = self
        while ancestor is not None:
            if ancestor is child:
                logger.debug("Rejected %r: would contain itself", child)
                raise ConflictError(
                    f"Cannot add {child._display_name} to {self._display_name}, "
                    f"because {self._display_name} is inside it"
                )
            ancestor = ancestor._parent

    def _attach(self, child: Route) -> None:
        """Append child to this route, enforcing a single parent.

        Raises:
            ConflictError: If child already belongs to another route, or
                if attaching it would create a cycle.
        """
        self._check_attach(child)
        child._parent = self
        if child not in self._children:
            self._children.append(child)

    @property
    def root(self) -> Route:
        """Get the topmost route of this tree."""
        if self._parent is None:
            return self
        return self._parent.root

    @property
    def depth(self) -> int:
        """Get the depth of this route in the tree (root=0)."""
        if self._parent is None:
            return 0
        return self._parent.depth + 1

    # ==================== Derived Identity ====================

    @property
    def full_name(self) -> str:
        """Dot-joined names from the root to this route, skipping empty ones."""
        parts = [self._parent.full_name if self._parent is not None else '', self.name]
        return '.'.join(part for part in parts if part)

    @property
    def full_path(self) -> str:
        """Concatenated paths from the root to this route."""
        parts = [self._parent.full_path if self._parent is not None else '', self.path]
        return ''.join(part for part in parts if part)

    @property
    def is_dynamic(self) -> bool:
        """True if this route's own path has a ':name' segment."""
        return is_dynamic(self.path)

    @property
    def is_page(self) -> bool:
        """True if this route has no children."""
        return not self._children

    def matches(self, path: str) -> bool:
        """Check whether a concrete path matches this route's full path.

        Args:
            path: A path with no dynamic segments, e.g. '/classes/server'.

        Raises:
            InvalidArgumentError: If path contains ':'.
        """
        return match_path(self.full_path, path)

    # ==================== Building ====================

    def add(self, definition: RouteDefinition | Mapping[str, Any]) -> Route:
        """Create a child route (with its whole subtree) from a definition.

        The subtree is built first, then the new route is attached to this
        one, then every new route is announced in pre-order, so that each
        listener along the completed parent chain sees it exactly once.

        Args:
            definition: RouteDefinition or equivalent dict. A missing path
                defaults to '/<name>'.

        Returns:
            The new Route.

        Example:
            >>> router.add({'name': 'blog', 'label': 'Blog',
            ...             'routes': [{'name': 'post', 'label': 'Post'}]})
        """
        route = _build_route(as_definition(definition))
        self._attach(route)
        logger.debug("Attached %r to %r", route, self)
        route._announce()
        return route

    def _announce(self) -> None:
        """Notify this route and its new descendants, in pre-order."""
        self.did_create_route(self)
        for _full_name, route in self.walk():
            route.did_create_route(route)

    # ==================== Notifications ====================

    def on_new_route(self, callback: RouteCallback | None) -> None:
        """Register the listener called for every route attached below.

        Only one listener is kept: a new registration replaces the previous
        one, and None removes it.

        Args:
            callback: Function receiving the newly attached Route.
        """
        self._on_new_route = callback

    def did_create_route(self, route: Route) -> None:
        """Fire this route's listener for route, then bubble to the parent."""
        if self._on_new_route is not None:
            self._on_new_route(route)
        if self._parent is not None:
            self._parent.did_create_route(route)

    # ==================== Walk ====================

    def walk(
        self, callback: RouteCallback | None = None
    ) -> Iterator[tuple[str, Route]] | None:
        """Walk every descendant in pre-order (definition order).

        Args:
            callback: Optional function to call on each route.
                If provided, walk returns None.

        Yields:
            Tuples of (full_name, route) if no callback provided.

        Example:
            >>> for full_name, route in router.walk():
            ...     print(full_name, route.label)
        """
        if callback is not None:
            for route in self._children:
                callback(route)
                route.walk(callback)
            return None

        def _walk_gen(parent: Route) -> Iterator[tuple[str, Route]]:
            for route in parent._children:
                yield route.full_name, route
                yield from _walk_gen(route)

        return _walk_gen(self)

    def _descendants(self) -> Iterator[Route]:
        for _full_name, route in self.walk():
            yield route

    # ==================== Queries ====================

    @property
    def pages(self) -> list[Route]:
        """Leaf routes below this one, depth-first in definition order."""
        return [route for route in self._descendants() if route.is_page]

    def find(self, **criteria: str) -> Route | None:
        """Return the first descendant whose fields equal all criteria.

        Args:
            **criteria: Any of label, name, full_name, path, full_path.

        Returns:
            The first matching Route in pre-order, or None.

        Raises:
            InvalidArgumentError: If a criterion is not a searchable field.

        Example:
            >>> router.find(name='overview').full_path
            '/docs/getting-started/overview'
        """
        unknown = set(criteria) - set(SEARCH_FIELDS)
        if unknown:
            raise InvalidArgumentError(
                f"Cannot search routes by {', '.join(sorted(unknown))}; "
                f"valid fields are {', '.join(SEARCH_FIELDS)}"
            )
        for route in self._descendants():
            if all(getattr(route, key) == value for key, value in criteria.items()):
                return route
        return None

    def has(self, **criteria: str) -> bool:
        """True if find() with the same criteria returns a route."""
        return self.find(**criteria) is not None

    def router_for(self, full_path: str) -> Route | None:
        """Return the descendant (branch or leaf) with this exact full path."""
        return self.find(full_path=full_path)

    # ==================== Navigation ====================

    @property
    def active_path(self) -> str | None:
        """The currently selected path, held by the root route."""
        if self._parent is not None:
            return self._parent.active_path
        return self._active_path

    @active_path.setter
    def active_path(self, path: str | None) -> None:
        if self._parent is not None:
            logger.debug("Rejected active_path %r on child %r", path, self)
            raise InvalidOperationError(
                "active_path can only be set on the router, not a child route"
            )
        logger.debug("Active path set to %r", path)
        self._active_path = path

    @property
    def active_page(self) -> Route | None:
        """The page matching active_path, ignoring trailing slashes."""
        active_path = self.active_path
        if active_path is None:
            return None
        path = strip_trailing_slashes(active_path)
        return next((page for page in self.pages if page.matches(path)), None)

    def _page_offset(self, offset: int) -> Route | None:
        """Return the root page at offset from the active page, if any."""
        root = self.root
        active = root.active_page
        if active is None:
            return None
        pages = root.pages
        index = pages.index(active) + offset
        if 0 <= index < len(pages):
            return pages[index]
        return None

    @property
    def previous_page(self) -> Route | None:
        """The page before the active one, or None at the first page."""
        return self._page_offset(-1)

    @property
    def next_page(self) -> Route | None:
        """The page after the active one, or None at the last page."""
        return self._page_offset(1)

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert this route and its subtree back to definition form.

        Returns:
            Dict with name, label, path, plus meta and routes when not empty.
        """
        result: dict[str, Any] = {
            'name': self.name,
            'label': self.label,
            'path': self.path,
        }
        if self.meta:
            result['meta'] = dict(self.meta)
        if self._children:
            result['routes'] = [child.as_dict() for child in self._children]
        return result


def _build_route(definition: RouteDefinition) -> Route:
    """Materialize a definition into a detached subtree, without notifying."""
    route = Route(
        name=definition.name,
        label=definition.label,
        path=definition.resolved_path,
        meta=definition.meta,
    )
    for child_definition in definition.routes:
        route._attach(_build_route(child_definition))
    return route
