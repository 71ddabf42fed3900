"""
Org Chart API.

Provides endpoints for:
- Uploading an employee CSV and rebuilding the hierarchy
- Searching employees by id, name or manager id
- Re-rooting the view and going up to a manager
- Laying out the current view and fitting it into a viewport
- Zooming and panning the camera
"""
import logging

from fastapi import Depends, FastAPI, File, HTTPException, Query, UploadFile

from api.dependencies import get_controller
from api.schemas import (
    NavigationResponse,
    SearchResponse,
    TransformResponse,
    UploadResponse,
    ViewResponse,
)
from config.settings import settings
from core.exceptions import EmptyInputError, ViewStateError
from hierarchy.index import SearchField
from view.controller import ViewStateController
from .chart_service import ChartService, employee_summary

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


# Create FastAPI app
orgchart_app = FastAPI(
    title="Org Chart API",
    description="Rebuild a reporting hierarchy from flat employee records and navigate it",
    version="1.0.0"
)


def _require_loaded(controller: ViewStateController):
    if controller.index is None:
        raise HTTPException(status_code=409, detail="No hierarchy loaded. Upload a CSV first.")


@orgchart_app.post("/upload", response_model=UploadResponse)
async def upload_records(
    file: UploadFile = File(...),
    controller: ViewStateController = Depends(get_controller)
):
    """
    Upload an employee CSV and rebuild the hierarchy.

    Args:
        file: CSV with EMPLOYEENUMBER / SUPERVISORPARTYID / FIRSTNAME columns (or aliases)
        controller: View controller

    Returns:
        Node count, default root, root candidates and build report
    """
    content = await file.read()
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File is not valid UTF-8 text")

    service = ChartService(controller)
    try:
        index = service.load_csv(text)
    except EmptyInputError as e:
        logger.warning("Upload %s rejected: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=f"CSV file is empty or invalid: {e}")

    return service.upload_summary(index, filename=file.filename)


@orgchart_app.get("/search", response_model=SearchResponse)
async def search_employees(
    q: str = Query("", description="Text to search for"),
    field: str = Query("name", description="One of: id, name, managerId"),
    controller: ViewStateController = Depends(get_controller)
):
    """
    Search employees. A single match becomes the new root.

    Returns:
        Matching employees and the selected root when auto-selected
    """
    _require_loaded(controller)
    try:
        search_field = SearchField.parse(field)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    results = controller.search(q, search_field)
    selected = employee_summary(controller.root) if len(results) == 1 else None

    return {
        "query": q,
        "field": search_field.value,
        "results": [employee_summary(node) for node in results],
        "selected": selected,
    }


@orgchart_app.post("/select/{employee_id}", response_model=NavigationResponse)
async def select_root(
    employee_id: str,
    controller: ViewStateController = Depends(get_controller)
):
    """Re-root the view at an employee."""
    _require_loaded(controller)
    try:
        node = controller.select_root_by_id(employee_id)
    except ViewStateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if node is None:
        raise HTTPException(status_code=404, detail=f"Employee not found: {employee_id}")

    return ChartService(controller).navigation_summary(moved=True)


@orgchart_app.post("/go-up", response_model=NavigationResponse)
async def go_up(controller: ViewStateController = Depends(get_controller)):
    """Move the root to its manager; moved=false when there is none."""
    _require_loaded(controller)
    moved = controller.go_to_parent()
    return ChartService(controller).navigation_summary(moved=moved)


@orgchart_app.post("/reset")
async def reset(controller: ViewStateController = Depends(get_controller)):
    """Discard the loaded hierarchy."""
    controller.reset()
    return {"state": controller.state.value}


@orgchart_app.get("/view", response_model=ViewResponse)
async def get_view(
    width: float = Query(..., gt=0, description="Viewport width in pixels"),
    height: float = Query(..., gt=0, description="Viewport height in pixels"),
    controller: ViewStateController = Depends(get_controller)
):
    """
    Lay out the current subtree and fit it into the viewport.

    Returns:
        Positioned nodes and the camera transform
    """
    _require_loaded(controller)
    try:
        return ChartService(controller).build_view(width, height)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@orgchart_app.post("/zoom", response_model=TransformResponse)
async def zoom(
    factor: float = Query(..., gt=0, description="Relative scale multiplier, e.g. 1.2 or 0.8"),
    controller: ViewStateController = Depends(get_controller)
):
    """Zoom the current camera about the viewport centre."""
    _require_loaded(controller)
    try:
        return controller.zoom_by(factor).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@orgchart_app.post("/pan", response_model=TransformResponse)
async def pan(
    dx: float = Query(0.0),
    dy: float = Query(0.0),
    controller: ViewStateController = Depends(get_controller)
):
    """Shift the current camera by a screen offset."""
    _require_loaded(controller)
    try:
        return controller.pan_by(dx, dy).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@orgchart_app.get("/health")
async def health(controller: ViewStateController = Depends(get_controller)):
    """Health check."""
    return {"status": "ok", "state": controller.state.value}


# Export app for uvicorn
app = orgchart_app
