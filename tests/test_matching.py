# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for path matching and route definitions."""

import pytest

from genro_routetree import (
    DEFAULT_ROUTES,
    InvalidArgumentError,
    Route,
    RouteDefinition,
    Router,
    load_definitions,
    match_path,
)
from genro_routetree.matching import is_dynamic, strip_trailing_slashes


class TestMatchPath:
    """Tests for match_path."""

    def test_dynamic_segment(self):
        """Test a dynamic segment matches one concrete segment."""
        assert match_path('/classes/:classSlug', '/classes/server') is True

    def test_dynamic_segment_extra_segment(self):
        """Test extra segments after a dynamic one do not match."""
        assert match_path('/classes/:classSlug', '/classes/server/extra') is False

    def test_dynamic_segment_missing(self):
        """Test a missing dynamic segment does not match."""
        assert match_path('/classes/:classSlug', '/classes') is False

    def test_dynamic_segment_empty(self):
        """Test a dynamic segment needs at least one character."""
        assert match_path('/classes/:classSlug', '/classes/') is False

    def test_dynamic_segment_in_middle(self):
        """Test fixed text after a dynamic segment must match."""
        pattern = '/classes/:classSlug/methods'
        assert match_path(pattern, '/classes/server/methods') is True
        assert match_path(pattern, '/classes/server/fields') is False

    def test_dynamic_run_after_literal(self):
        """Test a dynamic run may start inside a segment."""
        assert match_path('/v:version', '/v2') is True
        assert match_path('/v:version', '/v') is False
        assert match_path('/v:version', '/x2') is False

    def test_fixed_paths(self):
        """Test fixed paths must match exactly."""
        assert match_path('/docs/intro', '/docs/intro') is True
        assert match_path('/docs/intro', '/docs/intros') is False
        assert match_path('/docs/intro', '/docs') is False

    def test_empty_pattern(self):
        """Test the empty pattern only matches the empty path."""
        assert match_path('', '') is True
        assert match_path('', '/') is False

    def test_dynamic_candidate_raises(self):
        """Test a candidate with ':' is rejected."""
        with pytest.raises(InvalidArgumentError, match='no dynamic segments'):
            match_path('/classes/:classSlug', '/classes/:other')

    def test_route_matches_full_path(self):
        """Test Route.matches uses the full path."""
        api = Route('api', 'API', '/api')
        route = api.add({'name': 'class', 'label': 'Class', 'path': '/classes/:classSlug'})
        assert route.matches('/api/classes/server') is True
        assert route.matches('/classes/server') is False
        with pytest.raises(InvalidArgumentError):
            route.matches('/api/classes/:classSlug')


class TestPathHelpers:
    """Tests for is_dynamic and strip_trailing_slashes."""

    def test_is_dynamic(self):
        """Test ':' marks a dynamic path."""
        assert is_dynamic('/classes/:slug') is True
        assert is_dynamic('/classes') is False

    def test_strip_trailing_slashes(self):
        """Test every trailing slash is removed."""
        assert strip_trailing_slashes('/docs/intro//') == '/docs/intro'
        assert strip_trailing_slashes('/') == ''
        assert strip_trailing_slashes('/docs') == '/docs'


class TestRouteDefinition:
    """Tests for RouteDefinition and load_definitions."""

    def test_resolved_path_default(self):
        """Test a missing path resolves to '/<name>'."""
        assert RouteDefinition('docs', 'Docs').resolved_path == '/docs'
        assert RouteDefinition('index', 'Index', '/').resolved_path == '/'
        assert RouteDefinition('group', 'Group', '').resolved_path == ''

    def test_from_dict_nested(self):
        """Test nested dicts become nested definitions."""
        definition = RouteDefinition.from_dict({
            'name': 'docs',
            'label': 'Docs',
            'routes': [{'name': 'intro', 'label': 'Intro', 'meta': {'a': 1}}],
        })
        assert isinstance(definition.routes, tuple)
        (intro,) = definition.routes
        assert (intro.name, intro.label, intro.path) == ('intro', 'Intro', None)
        assert dict(intro.meta) == {'a': 1}

    def test_meta_is_read_only(self):
        """Test definition meta is a read-only copy."""
        meta = {'theme': 'dark'}
        definition = RouteDefinition('index', 'Index', '/', meta=meta)
        meta['theme'] = 'light'
        assert definition.meta['theme'] == 'dark'
        with pytest.raises(TypeError):
            definition.meta['theme'] = 'light'

    def test_default_routes_are_immutable(self):
        """Test the built-in table cannot be changed between routers."""
        assert isinstance(DEFAULT_ROUTES, tuple)
        assert all(isinstance(d, RouteDefinition) for d in DEFAULT_ROUTES)
        with pytest.raises(TypeError):
            DEFAULT_ROUTES[0].meta['theme'] = 'light'
        router = Router()
        router.find(name='index').meta['theme'] = 'light'
        assert Router().find(name='index').meta == {'theme': 'dark'}

    def test_from_dict_missing_key(self):
        """Test name and label are required."""
        with pytest.raises(TypeError, match="requires 'label'"):
            RouteDefinition.from_dict({'name': 'docs'})

    def test_from_dict_unknown_key(self):
        """Test unknown keys are rejected."""
        with pytest.raises(TypeError, match='children'):
            RouteDefinition.from_dict({'name': 'docs', 'label': 'Docs', 'children': []})

    def test_definition_is_frozen(self):
        """Test definitions cannot be modified."""
        definition = RouteDefinition('docs', 'Docs')
        with pytest.raises(AttributeError):
            definition.name = 'other'

    def test_as_dict(self):
        """Test as_dict omits unset keys."""
        definition = RouteDefinition('docs', 'Docs', routes=(
            RouteDefinition('index', 'Index', '/', meta={'theme': 'dark'}),
        ))
        assert definition.as_dict() == {
            'name': 'docs',
            'label': 'Docs',
            'routes': [
                {'name': 'index', 'label': 'Index', 'path': '/', 'meta': {'theme': 'dark'}},
            ],
        }

    def test_load_definitions_mixed(self):
        """Test dicts and definitions can be mixed."""
        definitions = load_definitions([
            RouteDefinition('a', 'A'),
            {'name': 'b', 'label': 'B'},
        ])
        assert [d.name for d in definitions] == ['a', 'b']

    def test_load_definitions_invalid_item(self):
        """Test non-definition items are rejected."""
        with pytest.raises(TypeError, match='not int'):
            load_definitions([1])
