"""
Core domain models for the org chart workflow.

These are pure data structures without business logic.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(eq=False)
class Employee:
    """A node in the reconstructed reporting tree.

    Equality is identity: two records with the same id are never both
    alive in one index, and the view controller relies on `is` checks.
    """
    id: str
    manager_id: Optional[str] = None
    name: str = "Unknown"
    children: List['Employee'] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """True when nobody reports to this employee."""
        return not self.children

    def to_dict(self, include_children: bool = False) -> Dict:
        """Convert to dictionary."""
        data = {
            'id': self.id,
            'manager_id': self.manager_id,
            'name': self.name,
            'direct_reports': len(self.children),
        }
        if include_children:
            data['children'] = [child.to_dict(include_children=True) for child in self.children]
        return data

    def __repr__(self):
        return f"<Employee(id={self.id}, manager_id={self.manager_id}, name={self.name})>"


@dataclass
class NodeExtent:
    """Centre point and size of one laid-out node card."""
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0

    @property
    def x1(self) -> float:
        return self.x - self.width / 2

    @property
    def y1(self) -> float:
        return self.y - self.height / 2

    @property
    def x2(self) -> float:
        return self.x + self.width / 2

    @property
    def y2(self) -> float:
        return self.y + self.height / 2


@dataclass
class PositionedNode:
    """Layout output for a single employee: position plus card size."""
    id: str
    name: str
    depth: int
    x: float
    y: float
    width: float
    height: float
    manager_id: Optional[str] = None
    direct_reports: int = 0

    def to_extent(self) -> NodeExtent:
        """Drop identity and keep only the geometry."""
        return NodeExtent(x=self.x, y=self.y, width=self.width, height=self.height)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'manager_id': self.manager_id,
            'depth': self.depth,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'direct_reports': self.direct_reports,
        }


@dataclass(frozen=True)
class ViewTransform:
    """Camera transform: screen = world * scale + translate."""
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0

    def invert(self, x: float, y: float):
        """Map a screen point back to world coordinates."""
        return (x - self.translate_x) / self.scale, (y - self.translate_y) / self.scale

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'translate_x': self.translate_x,
            'translate_y': self.translate_y,
            'scale': self.scale,
        }


@dataclass
class BuildReport:
    """Non-fatal findings collected while building a hierarchy."""
    record_count: int = 0
    skipped_records: int = 0
    duplicate_ids: List[str] = field(default_factory=list)
    unresolved_managers: Dict[str, str] = field(default_factory=dict)
    cyclic_ids: List[str] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        return len(self.duplicate_ids)

    @property
    def has_warnings(self) -> bool:
        return bool(self.unresolved_managers or self.cyclic_ids)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'record_count': self.record_count,
            'skipped_records': self.skipped_records,
            'duplicate_count': self.duplicate_count,
            'duplicate_ids': list(self.duplicate_ids),
            'unresolved_managers': dict(self.unresolved_managers),
            'cyclic_ids': list(self.cyclic_ids),
            'has_warnings': self.has_warnings,
        }
