"""
Physical corrections applied to rays leaving an orbiting camera.

Both corrections take and return unit ray directions in the same earth-centered
Cartesian frame as the camera position (meters).
"""
from typing import Iterable

import numpy as np
import scipy.spatial.transform

from . import config, helpers

Vector = Iterable[float]


def refraction_coefficient(camera_height: float, surface_height: float) -> float:
    """
    Return the atmospheric refraction coefficient `K` of a vertical camera.

    Follows the ASPRS Manual of Photogrammetry model, in which the angular
    displacement of a ray is `K * tan(theta)` for a ray `theta` radians off nadir.

    Arguments:
        camera_height: Camera height above the datum (m).
        surface_height: Ground height above the datum (m).

    Returns:
        Refraction coefficient (radians).

    Example:
        >>> k = refraction_coefficient(10000, 0)
        >>> round(k * 1e6, 2)
        83.1
    """
    H = camera_height / 1000
    h = surface_height / 1000
    return (
        2410 * H / (H ** 2 - 6 * H + 250) - 2410 * h ** 2 / ((h ** 2 - 6 * h + 250) * H)
    ) * 1e-6


def apply_atmospheric_refraction(
    camera_center: Vector,
    earth_radius: float,
    surface_elevation: float,
    ray: Vector,
) -> np.ndarray:
    """
    Correct a ray for the bending of light through the atmosphere.

    Light bends towards the vertical as it descends through denser air, so the
    straight line from the camera to the observed ground point is closer to nadir
    than the ray leaving the lens. The ray is rotated towards nadir, in the plane
    containing the ray and nadir, by `K * tan(theta)` (see
    :func:`refraction_coefficient`).

    Arguments:
        camera_center: Camera position (x, y, z).
        earth_radius: Radius of the spherical datum.
        surface_elevation: Mean ground height above the datum.
        ray: Ray direction (x, y, z).

    Returns:
        Corrected unit ray direction (x, y, z).

    Raises:
        ValueError: Camera is not above the surface.
        ValueError: Ray does not point below the horizontal.

    Example:
        A ray pointing at nadir is left unchanged.

        >>> ray = apply_atmospheric_refraction((7e6, 0, 0), 6.371e6, 0, (-1, 0, 0))
        >>> ray.tolist()
        [-1.0, 0.0, 0.0]
    """
    center = np.asarray(camera_center, dtype=float)
    ray = helpers.unit_vector(ray)
    height = np.linalg.norm(center) - earth_radius
    if height <= surface_elevation:
        raise ValueError(
            f"Camera height ({height}) is not above the surface ({surface_elevation})"
        )
    nadir = -helpers.unit_vector(center)
    theta = helpers.angle_between(ray, nadir)
    if theta >= np.pi / 2:
        raise ValueError(f"Ray is {np.degrees(theta)} degrees from nadir")
    axis = np.cross(ray, nadir)
    norm = np.linalg.norm(axis)
    if norm == 0:
        return ray
    delta = refraction_coefficient(height, surface_elevation) * np.tan(theta)
    rotation = scipy.spatial.transform.Rotation.from_rotvec(axis * (delta / norm))
    return helpers.unit_vector(rotation.apply(ray))


def apply_velocity_aberration(
    camera_center: Vector, velocity: Vector, earth_radius: float, ray: Vector
) -> np.ndarray:
    """
    Correct a ray for the aberration of light due to camera motion.

    To first order, a camera moving at velocity `v` sees light arriving from
    direction `u + v / c` when it actually travels along `u`. The ray recorded by
    the camera is the apparent one, so `v / c` is removed from it.

    Arguments:
        camera_center: Camera position (x, y, z).
        velocity: Camera velocity (vx, vy, vz) in length units per second.
        earth_radius: Radius of the spherical datum.
        ray: Ray direction (x, y, z).

    Returns:
        Corrected unit ray direction (x, y, z).

    Raises:
        ValueError: Camera is not above the datum.

    Example:
        Motion along the ray does not change its direction.

        >>> center, velocity = (7e6, 0, 0), (-7500, 0, 0)
        >>> ray = apply_velocity_aberration(center, velocity, 6.371e6, (-1, 0, 0))
        >>> bool(np.allclose(ray, (-1, 0, 0), rtol=0, atol=1e-15))
        True
    """
    center = np.asarray(camera_center, dtype=float)
    if np.linalg.norm(center) <= earth_radius:
        raise ValueError("Camera is not above the datum")
    ray = helpers.unit_vector(ray)
    shift = np.asarray(velocity, dtype=float) * (1 / config.speed_of_light)
    return helpers.unit_vector(ray - shift)
