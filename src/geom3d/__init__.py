from importlib.metadata import version
__version__ = version("geom3d")

# Configuration and errors
from .parameters import DEFAULT_TOLERANCES, EPSILON, Tolerances
from .exceptions import DegenerateVectorError, GeometryError, InvalidGeometryError, MissingValueError

# Primitives (each depends only on the ones before it)
from .point import Point3D
from .line import Line3D
from .cube import Cube3D

# Utilities
from .wireframe import build_wireframe, face_cycles
from .display import format_cube_report, format_point
from .utils import configure_debug_logging

__all__ = [
    # Primitives
    'Point3D',
    'Line3D',
    'Cube3D',

    # Errors
    'GeometryError',
    'MissingValueError',
    'InvalidGeometryError',
    'DegenerateVectorError',

    # Configuration
    'Tolerances',
    'DEFAULT_TOLERANCES',
    'EPSILON',

    # Utilities
    'build_wireframe',
    'face_cycles',
    'format_cube_report',
    'format_point',
    'configure_debug_logging',
]
