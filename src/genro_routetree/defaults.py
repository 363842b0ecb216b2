# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Built-in route table used by Router() when no definitions are given.

DEFAULT_ROUTES is a tuple of frozen RouteDefinition, so no router can change
it for the next one.
"""

from __future__ import annotations

from typing import Any

from .definition import RouteDefinition, load_definitions


def _pages(*entries: tuple[str, str]) -> list[dict[str, Any]]:
    return [{'name': name, 'label': label} for name, label in entries]


DEFAULT_ROUTES: tuple[RouteDefinition, ...] = load_definitions([
    {'name': 'index', 'label': 'Index', 'path': '/', 'meta': {'theme': 'dark'}},
    {'name': 'thanks', 'label': 'Thanks', 'meta': {'theme': 'dark'}},
    {
        'name': 'docs',
        'label': 'Documentation',
        'routes': [
            {
                'name': 'getting-started',
                'label': 'Getting started',
                'routes': _pages(
                    ('introduction', 'Introduction'),
                    ('installation', 'Installation'),
                    ('overview', 'Overview'),
                ),
            },
            {
                'name': 'main-concepts',
                'label': 'Main concepts',
                'routes': _pages(
                    ('route-handlers', 'Route handlers'),
                    ('shorthands', 'Shorthands'),
                    ('database', 'The Database'),
                    ('orm', 'The ORM'),
                    ('models', 'Models'),
                    ('relationships', 'Relationships'),
                    ('factories', 'Factories'),
                    ('fixtures', 'Fixtures'),
                    ('serializers', 'Serializers'),
                ),
            },
            {
                'name': 'testing',
                'label': 'Testing',
                'routes': _pages(
                    ('application-tests', 'Application tests'),
                    ('integration-and-unit-tests', 'Integration and unit tests'),
                    ('assertions', 'Assertions'),
                ),
            },
            {
                'name': 'advanced',
                'label': 'Advanced',
                'routes': _pages(
                    ('simulating-cookie-responses', 'Simulating cookie responses'),
                    ('mocking-guids', 'Mocking GUIDs'),
                    ('customizing-inflections', 'Customizing inflections'),
                ),
            },
            {
                'name': 'meta',
                'label': 'Meta',
                'routes': _pages(
                    ('comparison-with-other-tools', 'Comparison with other tools'),
                    ('about', 'About'),
                ),
            },
        ],
    },
    {
        'name': 'api',
        'label': 'API',
        'routes': [
            {'name': 'class', 'label': 'Class', 'path': '/classes/:classSlug'},
        ],
    },
    {
        'name': 'quickstarts',
        'label': 'Quickstarts',
        'routes': [
            {
                'name': 'react',
                'label': 'React',
                'routes': _pages(
                    ('development', 'Development'),
                    ('react-testing-library', 'React Testing Library'),
                ),
            },
            {
                'name': 'vue',
                'label': 'Vue',
                'routes': _pages(
                    ('development', 'Development'),
                    ('vue-test-utils', 'Vue Test Utils'),
                    ('exclude-from-production', 'Production builds'),
                ),
            },
            {
                'name': 'cypress',
                'label': 'Cypress',
                'routes': _pages(('setup', 'Setup')),
            },
        ],
    },
])
