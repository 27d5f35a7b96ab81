"""
Read and write optical bar cameras as text files.

Files are line-oriented and strictly ordered, with one `key = value` pair per
line after a version line and a camera type line::

    VERSION_4
    OPTICAL_BAR
    image_size = 1000 500
    image_center = 500 250
    pitch = 1.0000000000000001e-05
    f = 0.5
    scan_angle = 0.10000000000000001
    scan_rate = 0.050000000000000003
    forward_tilt = 0
    iC = 7000000 0 0
    iR = 1 0 0 0 1 0 0 0 1
    speed = 7500
    mean_earth_radius = 6371000
    mean_surface_elevation = 0
    use_motion_compensation = 0
    scan_dir = right

The rotation `iR` is stored as a row-major matrix, as for pinhole cameras.
`scan_dir = right` means the scan sweeps from left to right, and
`scan_dir = left` from right to left.
`use_motion_compensation` is a multiplier and is written as a number,
so a fractional value such as `0.5` is written and read back as is.
"""
import pathlib
import re
import warnings
from typing import Any, Callable, List, Optional, Union

import numpy as np
import scipy.spatial.transform

from . import camera, config
from .errors import FormatError

VERSION = 4
"""Version written to files, and the oldest version that can be read."""

TYPE = "OPTICAL_BAR"
"""Camera type tag."""

# key, number of values, type, constructor argument, label (for error messages)
FIELDS = (
    ("image_size", 2, int, "image_size", "image size"),
    ("image_center", 2, float, "center_loc_pixels", "image center"),
    ("pitch", 1, float, "pixel_size", "pixel pitch"),
    ("f", 1, float, "focal_length", "focal length"),
    ("scan_angle", 1, float, "scan_angle_radians", "scan angle"),
    ("scan_rate", 1, float, "scan_rate_radians", "scan rate"),
    ("forward_tilt", 1, float, "forward_tilt_radians", "forward tilt angle"),
    ("iC", 3, float, "initial_position", "initial position"),
    ("iR", 9, float, "initial_orientation", "rotation matrix"),
    ("speed", 1, float, "speed", "speed"),
    ("mean_earth_radius", 1, float, "mean_earth_radius", "mean earth radius"),
    (
        "mean_surface_elevation",
        1,
        float,
        "mean_surface_elevation",
        "mean surface elevation",
    ),
    (
        "use_motion_compensation",
        1,
        float,
        "use_motion_compensation",
        "use motion compensation",
    ),
)

Path = Union[str, pathlib.Path]


def read(path: Path, **kwargs: Any) -> "camera.OpticalBarCamera":
    """
    Read a camera from a file.

    See :func:`write` for the reverse.

    Arguments:
        path: Path to file.
        **kwargs: Additional arguments to :class:`~opticalbar.OpticalBarCamera`
            (e.g. `apply_atmospheric_refraction`).
            These override any read from **path**.

    Raises:
        OSError: File could not be opened.
        FormatError: File is malformed or unsupported.
    """
    with open(path, mode="r") as fp:
        txt = fp.read()
    return parse(txt, **kwargs)


def parse(txt: str, **kwargs: Any) -> "camera.OpticalBarCamera":
    """
    Parse a camera from text.

    Arguments:
        txt: File contents.
        **kwargs: Additional arguments to :class:`~opticalbar.OpticalBarCamera`.
            These override any read from **txt**.

    Raises:
        FormatError: Text is malformed or unsupported.

    Example:
        >>> cam = parse(
        ...     "VERSION_4\\nOPTICAL_BAR\\nimage_size = 10 5\\nimage_center = 5 2.5\\n"
        ...     "pitch = 1\\nf = 1\\nscan_angle = 1\\nscan_rate = 1\\n"
        ...     "forward_tilt = 0\\niC = 7000000 0 0\\niR = 1 0 0 0 1 0 0 0 1\\n"
        ...     "speed = 7500\\nmean_earth_radius = 6371000\\n"
        ...     "mean_surface_elevation = 0\\nuse_motion_compensation = 1\\n"
        ...     "scan_dir = left\\n"
        ... )
        >>> cam.image_size
        array([10.,  5.])
        >>> cam.scan_left_to_right
        False
        >>> parse("VERSION_3\\nOPTICAL_BAR\\n")
        Traceback (most recent call last):
          ...
        opticalbar.errors.FormatError: Versions prior to 4 are not supported: VERSION_3
    """
    lines = iter(txt.splitlines())
    line = next(lines, "")
    if "VERSION" not in line:
        raise FormatError("Version missing")
    match = re.match(r"\s*VERSION_([+-]?\d+)", line)
    if not match:
        raise FormatError(f"Could not read the version: {line}")
    version = int(match.group(1))
    if version < VERSION:
        raise FormatError(f"Versions prior to {VERSION} are not supported: {line}")
    if version > VERSION:
        warnings.warn(f"Reading VERSION_{version} as VERSION_{VERSION}")
    line = next(lines, "")
    if TYPE not in line:
        raise FormatError(f"Expected {TYPE} type, but got type: {line}")
    args = {}
    for key, n, dtype, name, label in FIELDS:
        line = next(lines, None)
        values = _parse_values(line, key=key, n=n, dtype=dtype)
        if values is None:
            raise FormatError(f"Could not read the {label}: {line}")
        args[name] = values[0] if n == 1 else values
    matrix = np.reshape(args["initial_orientation"], (3, 3))
    if not np.linalg.det(matrix) > 0:
        raise FormatError(f"Could not read the rotation matrix: {matrix.tolist()}")
    try:
        rotation = scipy.spatial.transform.Rotation.from_matrix(matrix)
    except ValueError as e:
        raise FormatError(f"Could not read the rotation matrix: {e}") from e
    args["initial_orientation"] = rotation.as_rotvec()
    line = next(lines, None)
    if line is None:
        warnings.warn("Scan direction missing: assuming left to right")
        line = ""
    args["scan_left_to_right"] = "scan_dir = left" not in line
    try:
        return camera.OpticalBarCamera(**{**args, **kwargs})
    except ValueError as e:
        raise FormatError(f"Invalid camera parameters: {e}") from e


def write(path: Path, cam: "camera.OpticalBarCamera") -> None:
    """
    Write a camera to a file.

    See :func:`read` for the reverse. The file is written in place,
    so a failure while writing may leave it incomplete.

    Arguments:
        path: Path to file.
        cam: Camera.

    Raises:
        OSError: File could not be opened.
    """
    txt = dumps(cam)
    with open(path, mode="w") as fp:
        fp.write(txt)


def dumps(cam: "camera.OpticalBarCamera") -> str:
    """
    Format a camera as text.

    Numbers are written with :data:`config.precision` significant digits.
    The rotation is that of the camera pose at pixel (0, 0).

    Arguments:
        cam: Camera.

    Example:
        >>> cam = camera.OpticalBarCamera((10, 5), 1, 0.5, 1, 1)
        >>> print(dumps(cam).splitlines()[2:5])
        ['image_size = 10 5', 'image_center = 5 2.5', 'pitch = 1']
    """
    rotation = cam.camera_pose((0, 0)).as_matrix()
    values = {
        "image_size": [int(x) for x in cam.image_size],
        "image_center": cam.center_loc_pixels,
        "pitch": [cam.pixel_size],
        "f": [cam.focal_length],
        "scan_angle": [cam.scan_angle_radians],
        "scan_rate": [cam.scan_rate_radians],
        "forward_tilt": [cam.forward_tilt_radians],
        "iC": cam.initial_position,
        "iR": rotation.ravel(),
        "speed": [cam.speed],
        "mean_earth_radius": [cam.mean_earth_radius],
        "mean_surface_elevation": [cam.mean_surface_elevation],
        "use_motion_compensation": [cam.use_motion_compensation],
    }
    lines = [f"VERSION_{VERSION}", TYPE]
    for key, *_ in FIELDS:
        lines.append(f"{key} = " + " ".join(_format_number(x) for x in values[key]))
    lines.append("scan_dir = " + ("right" if cam.scan_left_to_right else "left"))
    return "\n".join(lines) + "\n"


def _format_number(x: Union[int, float]) -> str:
    """
    Format a number to survive a round trip through text.

    Example:
        >>> _format_number(0.1)
        '0.10000000000000001'
        >>> _format_number(3)
        '3'
    """
    if isinstance(x, (int, np.integer)):
        return str(int(x))
    return f"{float(x):.{config.precision}g}"


def _parse_values(
    line: Optional[str], key: str, n: int, dtype: Callable = float
) -> Optional[List[Any]]:
    """
    Parse the values of a `key = value ...` line.

    Values beyond the first `n` are ignored.

    Returns:
        Values, or `None` if the line is missing, has a different key,
        or has fewer than `n` values of type `dtype`.

    Example:
        >>> _parse_values("iC = 1 2 3", key="iC", n=3)
        [1.0, 2.0, 3.0]
        >>> _parse_values("iC = 1 2", key="iC", n=3) is None
        True
        >>> _parse_values("speed = 1", key="iC", n=1) is None
        True
    """
    if line is None:
        return None
    match = re.match(r"\s*" + re.escape(key) + r"\s*=(.*)$", line)
    if not match:
        return None
    tokens = match.group(1).split()
    if len(tokens) < n:
        return None
    try:
        return [dtype(token) for token in tokens[:n]]
    except ValueError:
        return None
