"""opticalbar: Image-formation geometry of panoramic optical bar cameras."""
from . import config, corrections, helpers, io, optimize
from .camera import OpticalBarCamera
from .errors import CameraModelError, FormatError, PixelToRayError, PointToPixelError
from .io import read, write

__all__ = [
    "config",
    "corrections",
    "helpers",
    "io",
    "optimize",
    "OpticalBarCamera",
    "CameraModelError",
    "FormatError",
    "PixelToRayError",
    "PointToPixelError",
    "read",
    "write",
]
