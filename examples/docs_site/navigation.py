# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Docs site navigation example.

Renders the sidebar and the previous/next footer of a documentation page
from the built-in route table.

Run: python examples/docs_site/navigation.py /docs/main-concepts/database
"""

from __future__ import annotations

import sys

from genro_routetree import Route, Router


def sidebar(section: Route) -> list[str]:
    """One line per route below section, indented by depth."""
    lines = []
    for _full_name, route in section.walk():
        indent = '  ' * (route.depth - section.depth - 1)
        marker = '*' if route is section.root.active_page else '-'
        lines.append(f"{indent}{marker} {route.label} ({route.full_path})")
    return lines


def footer(router: Router) -> str:
    previous_page, next_page = router.previous_page, router.next_page
    left = f"<- {previous_page.label}" if previous_page else ''
    right = f"{next_page.label} ->" if next_page else ''
    return f"{left:<40}{right:>40}"


def main(path: str) -> None:
    router = Router()
    router.active_path = path
    page = router.active_page
    if page is None:
        print(f"No page for {path}")
        return
    print(f"# {page.label}")
    print('\n'.join(sidebar(router.router_for('/docs'))))
    print(footer(router))


if __name__ == '__main__':
    main(sys.argv[1] if len(sys.argv) > 1 else '/docs/getting-started/introduction')
