"""Global configuration options."""
import numpy as np

abs_tolerance = float(np.finfo(float).eps)
"""
Absolute tolerance of the inverse projection solver.

Machine epsilon for doubles, the smallest value accepted by
:func:`scipy.optimize.least_squares` with the Levenberg-Marquardt method.
"""

rel_tolerance = float(np.finfo(float).eps)
"""Relative tolerance of the inverse projection solver."""

max_iterations = 100000
"""Maximum number of objective evaluations of the inverse projection solver."""

speed_of_light = 299792458.0
"""Speed of light in vacuum (m/s), used by the velocity aberration correction."""

precision = 17
"""
Significant digits of numbers written to camera files.

17 digits survive a double -> text -> double conversion exactly.
"""

max_residual = 1e-9
"""
Largest angle (radians) accepted between a solved pixel's ray and its point.

Guards against the inverse projection solver converging on a local minimum.
"""
