"""Helper functions shared across modules."""
import json
import pathlib
import re
from typing import Any, Callable, Iterable, Optional, Union

import numpy as np


# ---- General ---- #


def format_list(
    x: Iterable, length: int = None, default: Any = None, dtype: Callable = None
) -> Optional[list]:
    """
    Return object as a formatted list.

    Arguments:
        x: Object to format
        length: Output object length.
            If `None`, ouput length is equal to input length.
            If shorter than the input, a subset of the input is returned.
            If longer than the input and `default` is `None`,
            must be a multiple of the input length (`x` is repeated).
            If `default` is not `None`, the output is padded with `default` elements.
        default: Default element value.
            If `None`, `x` is repeated to achieve length `length`.
        dtype: Data type to coerce list elements to.
            If `None`, data is left as-is.

    Raises:
        ValueError: Output length is not multiple of input length.

    Examples:
        >>> format_list([0, 1], length=1)
        [0]
        >>> format_list([0, 1], length=3)
        Traceback (most recent call last):
          ...
        ValueError: Output length is not multiple of input length
        >>> format_list([0, 1], length=3, default=2)
        [0, 1, 2]
        >>> format_list([0, 1], length=4)
        [0, 1, 0, 1]
        >>> format_list([0, 1], dtype=float)
        [0.0, 1.0]
        >>> format_list(None) is None
        True
    """
    if x is None:
        return x
    if not np.iterable(x):
        x = [x]
    elif not isinstance(x, list):
        x = list(x)
    if length:
        nx = len(x)
        if nx > length:
            x = x[0:length]
        elif nx < length:
            if default is not None:
                x += [default] * (length - nx)
            elif nx > 0:
                # Repeat list
                if length % nx != 0:
                    raise ValueError("Output length is not multiple of input length")
                x *= length // nx
    if dtype:
        x = [dtype(i) for i in x]
    return x


def read_json(path: Union[str, pathlib.Path], **kwargs: Any) -> Union[dict, list]:
    """
    Read JSON from file.

    Arguments:
        path: Path to file.
        **kwargs: Optional arguments to :func:`json.load`.
    """
    with open(path, mode="r") as fp:
        return json.load(fp, **kwargs)


def write_json(
    obj: Union[dict, list],
    path: Union[str, pathlib.Path] = None,
    flat_arrays: bool = False,
    **kwargs: Any
) -> Optional[str]:
    """
    Write object to JSON.

    Arguments:
        obj: Object to write as JSON.
        path: Path to file.
        flat_arrays: Whether to flatten JSON arrays to a single line.
            By default, :func:`json.dumps` puts each array element on a new line if
            `indent` is `0` or greater.
        **kwargs: Optional arguments to :func:`json.dumps`.

    Returns:
        JSON string (if `path` is `None`).

    Examples:
        >>> write_json({'x': [0, 1]})
        '{"x": [0, 1]}'
        >>> write_json({'x': [0, 1]}, indent=2, flat_arrays=True)
        '{\\n  "x": [0, 1]\\n}'
    """
    txt = json.dumps(obj, **kwargs)
    if flat_arrays and kwargs.get("indent", -1) >= 0:
        separators = kwargs.get("separators")
        sep = separators[0] if separators else ", "
        squished_sep = re.sub(r"\s", "", sep)

        def flatten(match):
            return re.sub(squished_sep, sep, re.sub(r"\s", "", match.group(0)))

        txt = re.sub(r"(\[\s*)+[^\]\{]*(\s*\])+", flatten, txt)
    if path:
        path = pathlib.Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(txt)
        return None
    return txt


# ---- Vectors ---- #


def unit_vector(a: Iterable[float]) -> np.ndarray:
    """
    Scale a vector to unit length.

    Arguments:
        a: Vector (n, ).

    Raises:
        ValueError: Vector has zero (or non-finite) length.

    Examples:
        >>> unit_vector([3, 0, 4]).tolist()
        [0.6, 0.0, 0.8]
        >>> unit_vector([0, 0, 0])
        Traceback (most recent call last):
          ...
        ValueError: Cannot normalize a vector of length 0.0
    """
    a = np.asarray(a, dtype=float)
    norm = np.linalg.norm(a)
    if not np.isfinite(norm) or norm == 0:
        raise ValueError(f"Cannot normalize a vector of length {norm}")
    return a / norm


def rotation_x_axis(radians: float) -> np.ndarray:
    """
    Return the matrix of a counterclockwise rotation about the x-axis.

    Arguments:
        radians: Rotation angle.

    Examples:
        >>> np.round(rotation_x_axis(np.pi / 2) @ [0, 1, 0], 12).tolist()
        [0.0, 0.0, 1.0]
    """
    c, s = np.cos(radians), np.sin(radians)
    return np.array([(1, 0, 0), (0, c, -s), (0, s, c)], dtype=float)


def angle_between(a: Iterable[float], b: Iterable[float]) -> float:
    """
    Return the angle between two vectors in radians.

    Uses `arctan2` of the cross and dot products, which remains accurate for
    nearly parallel vectors.

    Examples:
        >>> round(float(np.degrees(angle_between([1, 0, 0], [0, 1, 0]))), 12)
        90.0
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return float(np.arctan2(np.linalg.norm(np.cross(a, b)), np.dot(a, b)))
