"""Generic nonlinear least-squares solver used to invert camera models."""
from typing import Callable, Iterable, Tuple

import numpy as np
import scipy.optimize

from . import config

Objective = Callable[[np.ndarray], np.ndarray]

EPS = float(np.finfo(float).eps)


def levenberg_marquardt(
    fun: Objective,
    x0: Iterable[float],
    target: Iterable[float] = None,
    abs_tol: float = None,
    rel_tol: float = None,
    max_iterations: int = None,
) -> Tuple[np.ndarray, int]:
    """
    Find the parameters that bring an objective closest to a target.

    Minimizes `sum((fun(x) - target) ** 2)` with the Levenberg-Marquardt
    algorithm (:func:`scipy.optimize.least_squares` with `method='lm'`) and a
    finite-difference Jacobian. The number of residuals must be at least the
    number of parameters.

    Arguments:
        fun: Objective function returning residuals (m, ) for parameters (n, ).
        x0: Initial guess (n, ).
        target: Target residuals (m, ). Zero if `None`.
        abs_tol: Tolerance on the norm of the gradient.
            Defaults to :data:`config.abs_tolerance`.
        rel_tol: Tolerance on the relative change of the cost
            and of the parameters. Defaults to :data:`config.rel_tolerance`.
        max_iterations: Maximum number of function evaluations.
            Defaults to :data:`config.max_iterations`.

    Returns:
        Solution (n, ) and solver status:

            - `-1`: improper input (e.g. fewer residuals than parameters)
            - `0`: maximum number of function evaluations reached
            - `1` to `4`: converged (gradient, cost, step, or cost and step)

    Example:
        >>> x, status = levenberg_marquardt(lambda x: x ** 2, x0=[1.0], target=[4.0])
        >>> status > 0
        True
        >>> round(float(x[0]), 9)
        2.0
    """
    if abs_tol is None:
        abs_tol = config.abs_tolerance
    if rel_tol is None:
        rel_tol = config.rel_tolerance
    if max_iterations is None:
        max_iterations = config.max_iterations
    x0 = np.atleast_1d(np.asarray(x0, dtype=float))
    if target is None:

        def residuals(x: np.ndarray) -> np.ndarray:
            return np.atleast_1d(fun(x))

    else:
        target = np.atleast_1d(np.asarray(target, dtype=float))

        def residuals(x: np.ndarray) -> np.ndarray:
            return np.atleast_1d(fun(x)) - target

    # MINPACK cannot terminate reliably below machine epsilon
    abs_tol, rel_tol = max(abs_tol, EPS), max(rel_tol, EPS)
    if residuals(x0).size < x0.size:
        return x0, -1
    fit = scipy.optimize.least_squares(
        residuals,
        x0=x0,
        method="lm",
        ftol=rel_tol,
        xtol=rel_tol,
        gtol=abs_tol,
        max_nfev=int(max_iterations),
    )
    return fit.x, int(fit.status)
