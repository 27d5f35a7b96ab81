"""Tests of the helpers module."""
import numpy as np
import pytest

from opticalbar import helpers


def test_unit_vector_divides_by_length() -> None:
    """Scales vectors to unit length without rounding simple ratios."""
    assert helpers.unit_vector([3, 0, 4]).tolist() == [0.6, 0.0, 0.8]
    assert helpers.unit_vector([0, -2, 0]).tolist() == [0.0, -1.0, 0.0]


@pytest.mark.parametrize("a", [(0, 0, 0), (np.inf, 0, 0), (np.nan, 1, 1)])
def test_unit_vector_rejects_degenerate_vectors(a: tuple) -> None:
    """Rejects vectors of zero or non-finite length."""
    with pytest.raises(ValueError):
        helpers.unit_vector(a)


def test_rotation_x_axis_is_orthonormal() -> None:
    """Returns a proper rotation that leaves the x-axis unchanged."""
    R = helpers.rotation_x_axis(0.3)
    np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-15)
    assert np.linalg.det(R) == pytest.approx(1)
    np.testing.assert_equal(R @ [1, 0, 0], [1, 0, 0])


def test_angle_between_nearly_parallel_vectors() -> None:
    """Resolves small angles between nearly parallel vectors."""
    angle = helpers.angle_between((1, 0, 0), (1, 1e-9, 0))
    assert angle == pytest.approx(1e-9, rel=1e-9)
    assert helpers.angle_between((1, 0, 0), (-1, 0, 0)) == pytest.approx(np.pi)
