"""Errors raised by camera models."""


class CameraModelError(Exception):
    """Base class of all camera model errors."""


class FormatError(CameraModelError, ValueError):
    """
    Camera file is malformed or unsupported.

    Raised for a missing or unsupported version, an unexpected camera type,
    or a missing, malformed or out-of-order field. The message names the field.
    """


class PixelToRayError(CameraModelError):
    """Image coordinates could not be projected to a ray."""


class PointToPixelError(CameraModelError):
    """World coordinates could not be projected into the image."""
