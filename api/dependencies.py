"""
API Dependencies - Dependency injection for FastAPI.

Provides the process-local view controller used by the chart endpoints.
"""
from typing import Optional

from config.settings import settings
from view.controller import ViewStateController


_controller: Optional[ViewStateController] = None


def get_controller() -> ViewStateController:
    """
    Dependency for the chart view controller.

    Returns:
        The shared ViewStateController, created on first use
    """
    global _controller
    if _controller is None:
        _controller = ViewStateController(config=settings)
    return _controller
