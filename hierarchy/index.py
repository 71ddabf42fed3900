"""
Node Index

Read-only mapping from employee id to node, produced by the hierarchy
builder. Provides lookup, field search and subtree traversal.
"""
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Union

from core.models import BuildReport, Employee


class SearchField(Enum):
    """Fields an index search can match against."""
    ID = "id"
    NAME = "name"
    MANAGER_ID = "managerId"

    @classmethod
    def parse(cls, value: Union['SearchField', str]) -> 'SearchField':
        """Accept an enum member, its value, or the snake_case attribute name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        for member in cls:
            if key == member.value or key.lower() == member.name.lower():
                return member
        raise ValueError(f"Unknown search field: {value!r}")


def _field_value(node: Employee, field: SearchField) -> Optional[str]:
    if field is SearchField.ID:
        return node.id
    if field is SearchField.NAME:
        return node.name
    return node.manager_id


class NodeIndex:
    """Owns every Employee of one build. Immutable once constructed."""

    def __init__(
        self,
        nodes: Dict[str, Employee],
        root_candidate_ids: Sequence[str],
        report: Optional[BuildReport] = None
    ):
        """
        Initialize node index.

        Args:
            nodes: id -> Employee, in insertion order
            root_candidate_ids: Ids of nodes nobody links as a child
            report: Findings from the build
        """
        self._nodes = dict(nodes)
        self._root_candidate_ids = tuple(root_candidate_ids)
        self.report = report or BuildReport()
        self._cyclic_ids = frozenset(self.report.cyclic_ids)

    @property
    def nodes(self) -> Mapping[str, Employee]:
        """Read-only view of id -> Employee."""
        return MappingProxyType(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._nodes.values())

    def __contains__(self, employee_id) -> bool:
        return employee_id in self._nodes

    def lookup(self, employee_id: str) -> Optional[Employee]:
        """Return the node with this id, or None."""
        return self._nodes.get(employee_id)

    def owns(self, node: Employee) -> bool:
        """True when node is the exact object stored under its id."""
        return self._nodes.get(node.id) is node

    @property
    def root_candidate_ids(self) -> List[str]:
        return list(self._root_candidate_ids)

    @property
    def root_candidates(self) -> List[Employee]:
        return [self._nodes[node_id] for node_id in self._root_candidate_ids]

    def default_root(self) -> Employee:
        """First root candidate, falling back to the first node."""
        if self._root_candidate_ids:
            return self._nodes[self._root_candidate_ids[0]]
        return next(iter(self._nodes.values()))

    def manager_of(self, node: Employee) -> Optional[Employee]:
        """The node's manager when its manager_id resolves, else None.

        Members of a reporting cycle have no manager here, so walking up
        always ends.
        """
        if not node.manager_id or node.id in self._cyclic_ids:
            return None
        return self._nodes.get(node.manager_id)

    def has_resolvable_manager(self, node: Employee) -> bool:
        return self.manager_of(node) is not None

    def search(self, query: str, field: Union[SearchField, str] = SearchField.NAME) -> List[Employee]:
        """
        Case-insensitive substring search over one field.

        A blank query matches nothing. Results keep index order. Nodes
        without a manager are skipped for managerId searches.

        Args:
            query: Text to look for
            field: SearchField or its string value ('id', 'name', 'managerId')

        Returns:
            Matching nodes
        """
        field = SearchField.parse(field)
        needle = (query or "").strip().lower()
        if not needle:
            return []

        results = []
        for node in self._nodes.values():
            value = _field_value(node, field)
            if value is None:
                continue
            if needle in value.lower():
                results.append(node)
        return results

    def subtree(self, root: Employee) -> List[Employee]:
        """Root followed by all its descendants, in pre-order."""
        ordered = []
        stack = [root]
        while stack:
            node = stack.pop()
            ordered.append(node)
            stack.extend(reversed(node.children))
        return ordered

    def max_depth(self, root: Employee) -> int:
        """Number of levels below root (a leaf root gives 0)."""
        deepest = 0
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in node.children)
        return deepest

    def __repr__(self):
        return f"<NodeIndex(nodes={len(self._nodes)}, roots={len(self._root_candidate_ids)})>"
