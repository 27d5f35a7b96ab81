"""Tests of the corrections module."""
import numpy as np
import pytest

from opticalbar import config, corrections, helpers

CENTER = np.array((7e6, 0, 0))
NADIR = np.array((-1, 0, 0))
RADIUS = 6371000


def test_refraction_coefficient_vanishes_at_ground() -> None:
    """Has no effect for a camera at the surface."""
    assert corrections.refraction_coefficient(1000, 1000) == pytest.approx(
        0, abs=1e-15
    )


def test_refraction_bends_rays_towards_nadir() -> None:
    """Rotates rays towards nadir by the refraction angle."""
    ray = helpers.unit_vector((-1, 0.1, 0.05))
    corrected = corrections.apply_atmospheric_refraction(CENTER, RADIUS, 0, ray)
    theta = helpers.angle_between(ray, NADIR)
    k = corrections.refraction_coefficient(7e6 - RADIUS, 0)
    assert theta - helpers.angle_between(corrected, NADIR) == pytest.approx(
        k * np.tan(theta), rel=1e-6
    )
    # Stays in the plane of the ray and nadir
    assert np.dot(corrected, np.cross(ray, NADIR)) == pytest.approx(0, abs=1e-15)
    assert np.linalg.norm(corrected) == pytest.approx(1, abs=1e-15)


def test_refraction_decreases_with_surface_elevation() -> None:
    """Bends rays less over higher ground."""
    ray = helpers.unit_vector((-1, 0.1, 0))
    low = corrections.apply_atmospheric_refraction(CENTER, RADIUS, 0, ray)
    high = corrections.apply_atmospheric_refraction(CENTER, RADIUS, 3000, ray)
    assert helpers.angle_between(ray, high) < helpers.angle_between(ray, low)


def test_refraction_requires_camera_above_surface() -> None:
    """Fails for a camera at or below the surface."""
    with pytest.raises(ValueError):
        corrections.apply_atmospheric_refraction((6e6, 0, 0), RADIUS, 0, NADIR)
    with pytest.raises(ValueError):
        corrections.apply_atmospheric_refraction((RADIUS + 10, 0, 0), RADIUS, 10, NADIR)


def test_refraction_requires_downward_ray() -> None:
    """Fails for rays at or above the horizontal."""
    with pytest.raises(ValueError):
        corrections.apply_atmospheric_refraction(CENTER, RADIUS, 0, (0, 1, 0))
    with pytest.raises(ValueError):
        corrections.apply_atmospheric_refraction(CENTER, RADIUS, 0, (1, 0, 0))


def test_aberration_shifts_rays_against_velocity() -> None:
    """Shifts rays against the velocity by its ratio to the speed of light."""
    velocity = np.array((0, 7500, 0))
    corrected = corrections.apply_velocity_aberration(CENTER, velocity, RADIUS, NADIR)
    assert corrected[1] < 0
    assert helpers.angle_between(corrected, NADIR) == pytest.approx(
        7500 / config.speed_of_light, rel=1e-6
    )
    assert np.linalg.norm(corrected) == pytest.approx(1, abs=1e-15)


def test_aberration_requires_camera_above_datum() -> None:
    """Fails for a camera inside the datum."""
    with pytest.raises(ValueError):
        corrections.apply_velocity_aberration((6e6, 0, 0), (0, 7500, 0), RADIUS, NADIR)
