"""
View State Controller

Holds what the chart currently shows: the loaded index, the selected root,
the live search and the camera transform.

States:
    EMPTY  - nothing loaded
    LOADED - index present and a root selected

load() moves EMPTY/LOADED -> LOADED, reset() moves LOADED -> EMPTY.
select_root() and go_to_parent() keep the controller LOADED.
"""
import logging
from enum import Enum
from typing import List, Optional, Sequence, Union

import numpy as np

from config.settings import Settings, settings as default_settings
from core.constants import ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR
from core.exceptions import ViewStateError
from core.models import Employee, NodeExtent, PositionedNode, ViewTransform
from hierarchy.index import NodeIndex, SearchField
from hierarchy.layout import layout_tree
from utils.bbox_utils import fit_transform, scale_about

logger = logging.getLogger(__name__)


class ViewState(Enum):
    """Lifecycle state of a ViewStateController."""
    EMPTY = "empty"
    LOADED = "loaded"


class ViewStateController:
    """Navigation and camera state for one chart view.

    Holds a non-owning reference to a NodeIndex; the root is always the
    index's own Employee object, never a copy.
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings
        self.index: Optional[NodeIndex] = None
        self.root: Optional[Employee] = None
        self.search_query: str = ""
        self.search_field: SearchField = SearchField.NAME
        self.search_results: List[Employee] = []
        self.transform: ViewTransform = ViewTransform()
        self.viewport_width: Optional[float] = None
        self.viewport_height: Optional[float] = None

    @property
    def state(self) -> ViewState:
        return ViewState.LOADED if self.index is not None else ViewState.EMPTY

    def _require_loaded(self, action: str) -> NodeIndex:
        if self.index is None:
            raise ViewStateError(f"Cannot {action}: no hierarchy loaded")
        return self.index

    def _clear_search(self):
        self.search_query = ""
        self.search_results = []

    def load(self, index: NodeIndex) -> Employee:
        """
        Point the controller at a freshly built index.

        Selects the index's default root and clears search and camera.

        Returns:
            The selected root
        """
        self.index = index
        self.root = index.default_root()
        self._clear_search()
        self.transform = ViewTransform()
        logger.info("Loaded hierarchy with %d nodes; root %s", len(index), self.root.id)
        return self.root

    def reset(self):
        """Drop index, root, search and camera; back to EMPTY."""
        self.index = None
        self.root = None
        self.search_field = SearchField.NAME
        self._clear_search()
        self.transform = ViewTransform()
        self.viewport_width = None
        self.viewport_height = None

    def select_root(self, node: Employee) -> Employee:
        """
        Re-root the view at node. Committing a selection clears the search.

        Raises:
            ViewStateError: Nothing loaded, or node is not the index's own object
        """
        index = self._require_loaded("select a root")
        if not index.owns(node):
            raise ViewStateError(f"Employee {node.id} does not belong to the loaded hierarchy")

        self.root = node
        self._clear_search()
        return node

    def select_root_by_id(self, employee_id: str) -> Optional[Employee]:
        """Re-root at the node with this id; None (no change) when unknown."""
        index = self._require_loaded("select a root")
        node = index.lookup(employee_id)
        if node is None:
            return None
        return self.select_root(node)

    @property
    def can_go_to_parent(self) -> bool:
        if self.index is None or self.root is None:
            return False
        return self.index.has_resolvable_manager(self.root)

    def go_to_parent(self) -> bool:
        """
        Move the root up to its manager.

        Returns:
            True when the root changed, False for a no-op (no manager,
            unresolved manager, or nothing loaded)
        """
        if not self.can_go_to_parent:
            return False
        self.root = self.index.manager_of(self.root)
        return True

    def search(self, query: str, field: Union[SearchField, str] = SearchField.NAME) -> List[Employee]:
        """
        Run a search and keep it as the live result set.

        A single hit is selected straight away, which also clears the
        search state again.

        Returns:
            The matching nodes
        """
        index = self._require_loaded("search")
        self.search_field = SearchField.parse(field)
        self.search_query = query or ""
        self.search_results = index.search(self.search_query, self.search_field)

        results = list(self.search_results)
        if len(results) == 1:
            self.select_root(results[0])
        return results

    def visible_nodes(self) -> List[Employee]:
        """Current root and all its descendants."""
        index = self._require_loaded("list visible nodes")
        return index.subtree(self.root)

    def layout(self) -> List[PositionedNode]:
        """Lay out the visible subtree with the configured card geometry."""
        self._require_loaded("lay out the chart")
        return layout_tree(self.root, **self.config.get_layout_config())

    def compute_fit_transform(
        self,
        positions: Sequence[NodeExtent],
        viewport_width: float,
        viewport_height: float
    ) -> ViewTransform:
        """
        Transform that fits the given node extents into the viewport.

        Pure: depends only on the extents, the viewport and the settings.

        Raises:
            ValueError: If positions is empty or the viewport is not positive and finite
        """
        return fit_transform(
            positions,
            viewport_width,
            viewport_height,
            **self.config.get_fit_config()
        )

    def fit_to_screen(
        self,
        positions: Sequence[NodeExtent],
        viewport_width: float,
        viewport_height: float
    ) -> ViewTransform:
        """Compute the fit transform and make it the current camera."""
        transform = self.compute_fit_transform(positions, viewport_width, viewport_height)
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.transform = transform
        return transform

    def zoom_by(self, factor: float) -> ViewTransform:
        """
        Multiply the current scale, keeping the viewport centre fixed.

        The result is clamped to the interactive zoom range.
        """
        if self.viewport_width is None or self.viewport_height is None:
            anchor_x, anchor_y = 0.0, 0.0
        else:
            anchor_x, anchor_y = self.viewport_width / 2, self.viewport_height / 2

        min_scale, max_scale = self.config.get_zoom_range()
        self.transform = scale_about(self.transform, factor, anchor_x, anchor_y, min_scale, max_scale)
        return self.transform

    def zoom_in(self) -> ViewTransform:
        return self.zoom_by(ZOOM_IN_FACTOR)

    def zoom_out(self) -> ViewTransform:
        return self.zoom_by(ZOOM_OUT_FACTOR)

    def pan_by(self, dx: float, dy: float) -> ViewTransform:
        """
        Shift the current camera by a screen-space offset.

        Raises:
            ValueError: If dx or dy is NaN or infinite
        """
        if not (np.isfinite(dx) and np.isfinite(dy)):
            raise ValueError(f"Pan offset must be finite, got ({dx}, {dy})")
        self.transform = ViewTransform(
            translate_x=self.transform.translate_x + dx,
            translate_y=self.transform.translate_y + dy,
            scale=self.transform.scale
        )
        return self.transform
