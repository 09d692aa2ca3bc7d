"""Calendar aggregation and grid layout services."""

from icalgrid.services.calendar_builder import render
from icalgrid.services.calendar_merge import build_merged_table
from icalgrid.services.date_window import compute_window
from icalgrid.services.event_projector import to_display
from icalgrid.services.grid_renderer import render_grid
from icalgrid.services.html_builder import make_element, wrap_and_join

__all__ = [
    'compute_window',
    'to_display',
    'build_merged_table',
    'render_grid',
    'make_element',
    'wrap_and_join',
    'render',
]
