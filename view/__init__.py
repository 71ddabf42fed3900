"""View package - Navigation and camera state for the chart."""

from .controller import ViewState, ViewStateController

__all__ = [
    'ViewState',
    'ViewStateController',
]
