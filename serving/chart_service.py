"""
Chart Service

Glue between record sources, the hierarchy builder and a view controller.
Shared by the HTTP API and the command-line workflow.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Optional

from core.models import Employee
from hierarchy.builder import HierarchyBuilder
from hierarchy.index import NodeIndex
from hierarchy.layout import to_extents
from utils.record_utils import parse_csv_text
from view.controller import ViewStateController

logger = logging.getLogger(__name__)


def employee_summary(node: Employee) -> Dict:
    """Flat dict for one employee (no children)."""
    return {
        'id': node.id,
        'name': node.name,
        'manager_id': node.manager_id,
        'direct_reports': len(node.children),
    }


class ChartService:
    """Service for loading employee records and producing chart views."""

    def __init__(self, controller: ViewStateController, builder: Optional[HierarchyBuilder] = None):
        """
        Initialize chart service.

        Args:
            controller: View controller to drive
            builder: Hierarchy builder (default HierarchyBuilder())
        """
        self.controller = controller
        self.builder = builder or HierarchyBuilder()

    def load_records(self, records: Iterable[Mapping[str, str]]) -> NodeIndex:
        """
        Build a fresh hierarchy and point the controller at it.

        The previous view is reset first, so a failed build leaves the
        controller EMPTY rather than showing stale data.

        Raises:
            EmptyInputError: No usable records
        """
        self.controller.reset()
        index = self.builder.build(records)
        self.controller.load(index)
        return index

    def load_csv(self, text: str) -> NodeIndex:
        """Parse CSV text and load it."""
        return self.load_records(parse_csv_text(text))

    def upload_summary(self, index: NodeIndex, filename: Optional[str] = None) -> Dict:
        """Summary returned after a successful upload."""
        return {
            'filename': filename,
            'node_count': len(index),
            'root': employee_summary(self.controller.root),
            'root_candidates': [employee_summary(node) for node in index.root_candidates],
            'report': index.report.to_dict(),
        }

    def navigation_summary(self, moved: bool) -> Dict:
        return {
            'moved': moved,
            'root': employee_summary(self.controller.root),
            'can_go_to_parent': self.controller.can_go_to_parent,
        }

    def build_view(self, viewport_width: float, viewport_height: float) -> Dict:
        """
        Lay out the current subtree and fit it into the viewport.

        Args:
            viewport_width: Viewport width in pixels
            viewport_height: Viewport height in pixels

        Returns:
            Dict with root, positioned nodes, depth and camera transform
        """
        positions = self.controller.layout()
        transform = self.controller.fit_to_screen(
            to_extents(positions),
            viewport_width,
            viewport_height
        )
        root = self.controller.root

        return {
            'root': employee_summary(root),
            'can_go_to_parent': self.controller.can_go_to_parent,
            'max_depth': self.controller.index.max_depth(root),
            'nodes': [position.to_dict() for position in positions],
            'transform': transform.to_dict(),
        }

    def render_outline(self, root: Optional[Employee] = None) -> List[str]:
        """Indented text lines for a subtree (root defaults to the current root)."""
        root = root or self.controller.root
        lines = []
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            suffix = "" if node.is_leaf else f" ({len(node.children)})"
            lines.append("  " * depth + f"├─ [{node.id}] {node.name}{suffix}")
            stack.extend((child, depth + 1) for child in reversed(node.children))
        return lines
