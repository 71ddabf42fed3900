"""
Tree Layout

Simple top-down tidy layout for a reporting subtree. Any other layout can
be used instead; the fit step only needs each node's centre and card size.
"""
from typing import Dict, List

from core.constants import CARD_HEIGHT, CARD_WIDTH, HORIZONTAL_SPACING, VERTICAL_SPACING
from core.models import Employee, NodeExtent, PositionedNode


def layout_tree(
    root: Employee,
    node_width: float = CARD_WIDTH,
    node_height: float = CARD_HEIGHT,
    h_spacing: float = HORIZONTAL_SPACING,
    v_spacing: float = VERTICAL_SPACING
) -> List[PositionedNode]:
    """
    Assign a centre position to every node under root.

    Leaves take consecutive horizontal slots in pre-order; a parent is
    centred over its first and last child. Levels are one card height plus
    v_spacing apart. The root is placed at x = 0, y = 0.

    Args:
        root: Subtree root
        node_width: Card width
        node_height: Card height
        h_spacing: Gap between neighbouring cards
        v_spacing: Gap between levels

    Returns:
        PositionedNode list in pre-order (root first)
    """
    slot = node_width + h_spacing
    level = node_height + v_spacing

    x_of: Dict[int, float] = {}
    depth_of: Dict[int, int] = {id(root): 0}
    order: List[Employee] = []
    next_leaf = 0

    # Iterative post-order so deep chains do not hit the recursion limit
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            order.append(node)
            stack.append((node, True))
            for child in reversed(node.children):
                depth_of[id(child)] = depth_of[id(node)] + 1
                stack.append((child, False))
            continue

        if node.children:
            x_of[id(node)] = (x_of[id(node.children[0])] + x_of[id(node.children[-1])]) / 2
        else:
            x_of[id(node)] = next_leaf * slot
            next_leaf += 1

    offset = x_of[id(root)]
    return [
        PositionedNode(
            id=node.id,
            name=node.name,
            manager_id=node.manager_id,
            depth=depth_of[id(node)],
            x=x_of[id(node)] - offset,
            y=depth_of[id(node)] * level,
            width=node_width,
            height=node_height,
            direct_reports=len(node.children),
        )
        for node in order
    ]


def to_extents(positions: List[PositionedNode]) -> List[NodeExtent]:
    """Geometry-only view of a layout, as consumed by the fit transform."""
    return [position.to_extent() for position in positions]
