# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Route definitions - the declarative input of a Router.

A definition is a plain, immutable record describing one route and,
recursively, its children. Definitions can be written as dataclasses or as
plain dicts; both are normalized by load_definitions().

Example:
    >>> RouteDefinition.from_dict({
    ...     'name': 'docs',
    ...     'label': 'Documentation',
    ...     'routes': [{'name': 'intro', 'label': 'Introduction'}],
    ... })
    RouteDefinition(name='docs', label='Documentation', ...)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)

_KEYS = frozenset(('name', 'label', 'path', 'meta', 'routes'))


@dataclass(frozen=True)
class RouteDefinition:
    """Declarative description of a route and its children.

    Attributes:
        name: Identifier used to build dotted full names.
        label: Human readable title.
        path: Own path segment. None means '/<name>'.
        meta: Arbitrary metadata copied onto the route.
        routes: Child definitions, in navigation order.
    """

    name: str
    label: str
    path: str | None = None
    meta: Mapping[str, Any] | None = None
    routes: tuple[RouteDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # meta is read-only and routes a tuple, whatever was passed in
        if self.meta is not None:
            object.__setattr__(self, 'meta', MappingProxyType(dict(self.meta)))
        object.__setattr__(self, 'routes', tuple(self.routes))

    @property
    def resolved_path(self) -> str:
        """The path the route will get: explicit path or '/<name>'."""
        if self.path is None:
            return f"/{self.name}"
        return self.path

    @classmethod
    def from_dict(cls, source: Mapping[str, Any]) -> RouteDefinition:
        """Build a definition (recursively) from a plain mapping.

        Args:
            source: Mapping with 'name', 'label' and optional 'path',
                'meta', 'routes' keys.

        Raises:
            TypeError: If a required key is missing or an unknown key is given.
        """
        unknown = set(source) - _KEYS
        if unknown:
            raise TypeError(
                f"Unknown route definition keys: {', '.join(sorted(unknown))}"
            )
        for key in ('name', 'label'):
            if key not in source:
                raise TypeError(f"Route definition requires '{key}'")
        return cls(
            name=source['name'],
            label=source['label'],
            path=source.get('path'),
            meta=source.get('meta'),
            routes=load_definitions(source.get('routes') or ()),
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the mapping form, omitting unset optional keys."""
        result: dict[str, Any] = {'name': self.name, 'label': self.label}
        if self.path is not None:
            result['path'] = self.path
        if self.meta:
            result['meta'] = dict(self.meta)
        if self.routes:
            result['routes'] = [child.as_dict() for child in self.routes]
        return result


def as_definition(source: RouteDefinition | Mapping[str, Any]) -> RouteDefinition:
    """Normalize a single definition given as dataclass or mapping.

    Raises:
        TypeError: If source is neither a RouteDefinition nor a mapping.
    """
    if isinstance(source, RouteDefinition):
        return source
    if isinstance(source, Mapping):
        return RouteDefinition.from_dict(source)
    raise TypeError(
        f"route definition must be RouteDefinition or dict, not {type(source).__name__}"
    )


def load_definitions(
    source: Iterable[RouteDefinition | Mapping[str, Any]],
) -> tuple[RouteDefinition, ...]:
    """Normalize an ordered collection of definitions.

    Args:
        source: Iterable of RouteDefinition instances or mappings.

    Returns:
        Tuple of RouteDefinition in the given order.

    Raises:
        TypeError: If source is a single mapping/string, or an item is not
            a definition.
    """
    if isinstance(source, (str, Mapping, RouteDefinition)):
        raise TypeError(
            f"definitions must be a list of routes, not {type(source).__name__}"
        )
    definitions = tuple(as_definition(item) for item in source)
    logger.debug("Loaded %d route definitions", len(definitions))
    return definitions
