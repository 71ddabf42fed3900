"""
Pydantic schemas for API request/response validation.
"""
from typing import Dict, List, Optional
from pydantic import BaseModel


class EmployeeResponse(BaseModel):
    """Response for a single employee."""
    id: str
    name: str
    manager_id: Optional[str] = None
    direct_reports: int = 0


class BuildReportResponse(BaseModel):
    """Non-fatal findings of a hierarchy build."""
    record_count: int
    skipped_records: int
    duplicate_count: int
    duplicate_ids: List[str]
    unresolved_managers: Dict[str, str]
    cyclic_ids: List[str]
    has_warnings: bool = False


class UploadResponse(BaseModel):
    """Response after uploading a record file."""
    filename: Optional[str] = None
    node_count: int
    root: EmployeeResponse
    root_candidates: List[EmployeeResponse]
    report: BuildReportResponse


class SearchResponse(BaseModel):
    """Response for a field search."""
    query: str
    field: str
    results: List[EmployeeResponse]
    selected: Optional[EmployeeResponse] = None


class NavigationResponse(BaseModel):
    """Response for re-root / go-up actions."""
    moved: bool
    root: EmployeeResponse
    can_go_to_parent: bool


class TransformResponse(BaseModel):
    """Camera transform for the renderer."""
    translate_x: float
    translate_y: float
    scale: float


class PositionedNodeResponse(BaseModel):
    """Layout position of one visible node."""
    id: str
    name: str
    manager_id: Optional[str] = None
    depth: int
    x: float
    y: float
    width: float
    height: float
    direct_reports: int = 0


class ViewResponse(BaseModel):
    """Everything needed to draw the current view."""
    root: EmployeeResponse
    can_go_to_parent: bool
    max_depth: int
    nodes: List[PositionedNodeResponse]
    transform: TransformResponse
