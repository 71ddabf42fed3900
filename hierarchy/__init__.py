"""Hierarchy package - Reporting tree reconstruction, search and layout."""

from .index import NodeIndex, SearchField

from .builder import (
    HierarchyBuilder,
    build_hierarchy,
    create_nodes,
    find_cyclic_ids,
    link_nodes,
)

from .layout import (
    layout_tree,
    to_extents,
)

__all__ = [
    # Index
    'NodeIndex',
    'SearchField',

    # Builder
    'HierarchyBuilder',
    'build_hierarchy',
    'create_nodes',
    'find_cyclic_ids',
    'link_nodes',

    # Layout
    'layout_tree',
    'to_extents',
]
