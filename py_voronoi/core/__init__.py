"""
Core diagram-maintenance engine.
"""

from .point_store import PointStore
from .voronoi_diagram import Cell, Diagram, DiagramAdapter, compute_voronoi
from .render import DisplayMode, render_frame, frame_for
from .controller import InteractionController, KeyRelease, ButtonRelease, PointerMotion
from .persistence import save, load, load_file
from .errors import (VoronoiAppError, StartupArgumentError, PersistedFileError,
                     MalformedInputError, DegenerateGeometryError)

__all__ = ['PointStore', 'Cell', 'Diagram', 'DiagramAdapter', 'compute_voronoi',
           'DisplayMode', 'render_frame', 'frame_for',
           'InteractionController', 'KeyRelease', 'ButtonRelease', 'PointerMotion',
           'save', 'load', 'load_file',
           'VoronoiAppError', 'StartupArgumentError', 'PersistedFileError',
           'MalformedInputError', 'DegenerateGeometryError']
