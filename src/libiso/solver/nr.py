import logging
import math
from functools import partial
from typing import Callable

from pydantic import BaseModel, ConfigDict

from libiso.config import DEFAULT_SOLVER_SETTINGS, Criterion
from libiso.excepts import (
    FailedNewtonRaphson,
    TooManyIterations,
    ZeroDerivativeException,
)

logger = logging.getLogger(__name__)

_CRITERIA = ("step", "residual", "both")


class SolverState(BaseModel):
    """Snapshot of a Newton-Raphson run, returned with ``full_output=True``."""

    model_config = ConfigDict(frozen=True)

    estimate: float
    iterations: int
    residual: float
    tolerance: float
    max_iterations: int
    converged: bool


def newton_raphson(
    f: Callable[[float], float],
    x0: float,
    *,
    fprime: Callable[[float], float] | None = None,
    threshold: float = DEFAULT_SOLVER_SETTINGS.threshold,
    max_iterations: int = DEFAULT_SOLVER_SETTINGS.max_iterations,
    criterion: Criterion = DEFAULT_SOLVER_SETTINGS.criterion,
    derivative_step: float = DEFAULT_SOLVER_SETTINGS.derivative_step,
    zero_derivative: float = DEFAULT_SOLVER_SETTINGS.zero_derivative,
    bounds: tuple[float, float] | None = None,
    full_output: bool = False,
):
    r"""
    Find a root of the scalar function **f** using Newton-Raphson's method.

    Starting from **x0** the estimate is updated as

    $$
    x_{n+1} = x_n - \frac{f(x_n)}{f'(x_n)}
    $$

    until the convergence test selected by **criterion** is met. When no
    derivative is supplied a symmetric finite difference is used instead
    (see `numeric_derivative`).

    Parameters
    ----------
    f : callable
        Function of one real variable whose root is sought.
    x0 : float
        Initial guess. It must lie inside **bounds** when they are given.
    fprime : callable, optional
        Analytic derivative of **f**.
    threshold : float
        Convergence tolerance.
    max_iterations : int
        Maximum number of iterations.
    criterion : {"step", "residual", "both"}
        ``"step"`` stops when $|x_{n+1} - x_n| < threshold$, ``"residual"``
        when $|f(x_{n+1})| < threshold$ and ``"both"`` requires the two.
    derivative_step : float
        Step of the finite difference used when **fprime** is None.
    zero_derivative : float
        A derivative whose magnitude does not exceed this value stops the
        iterations instead of being divided by.
    bounds : tuple of float, optional
        Open interval $(lo, hi)$ the estimate must stay in. Steps leaving it
        are limited with `limit_step`.
    full_output : bool
        Whether to return the `SolverState` together with the root.

    Returns
    -------
    x : float
        The root. When **full_output** is True a tuple ``(x, state)``.

    Raises
    ------
    ValueError
        If the options are incorrect.
    ZeroDerivativeException
        If the derivative vanishes or is not finite.
    FailedNewtonRaphson
        If the function cannot be evaluated at an estimate.
    TooManyIterations
        If too many iterations are performed without convergence.
    """
    if criterion not in _CRITERIA:
        raise ValueError(f"criterion must be one of {_CRITERIA}, not {criterion!r}")
    if max_iterations < 1:
        raise ValueError("max_iterations must be a positive int.")
    if threshold <= 0:
        raise ValueError("threshold must be positive.")

    x = float(x0)
    if bounds is not None:
        lo, hi = bounds
        if not lo < x < hi:
            raise ValueError(f"initial guess {x} outside of bounds {bounds}")

    if fprime is None:
        fprime = partial(
            numeric_derivative, f, step=derivative_step, bounds=bounds
        )

    fx = _evaluate(f, x, 0)

    for iterations in range(1, max_iterations + 1):
        dfx = float(fprime(x))
        if not math.isfinite(dfx) or abs(dfx) <= zero_derivative:
            raise ZeroDerivativeException(
                "newton_raphson",
                f"f'({x:g}) = {dfx:g} (iteration {iterations})",
                x,
                fx,
            )

        dx = -fx / dfx
        if bounds is not None:
            dx = limit_step(x, dx, bounds)

        x_new = x + dx
        fx_new = _evaluate(f, x_new, iterations)

        logger.debug(
            "iteration %d: x = %.12g, f(x) = %.6g, dx = %.6g",
            iterations,
            x_new,
            fx_new,
            dx,
        )

        if _converged(criterion, abs(x_new - x), abs(fx_new), threshold):
            logger.debug("converged to %.12g in %d iterations", x_new, iterations)
            if full_output:
                return x_new, SolverState(
                    estimate=x_new,
                    iterations=iterations,
                    residual=fx_new,
                    tolerance=threshold,
                    max_iterations=max_iterations,
                    converged=True,
                )
            return x_new

        x, fx = x_new, fx_new

    raise TooManyIterations(
        "newton_raphson",
        f"no convergence after {max_iterations} iterations "
        f"(last estimate {x:g}, residual {fx:g})",
        x,
        fx,
    )


def numeric_derivative(
    f: Callable[[float], float],
    x: float,
    *,
    step: float = DEFAULT_SOLVER_SETTINGS.derivative_step,
    bounds: tuple[float, float] | None = None,
) -> float:
    r"""
    Symmetric finite difference approximation of $f'(x)$.

    $$
    f'(x) \approx \frac{f(x + h) - f(x - h)}{2h}
    $$

    With **bounds** the step is shrunk so that both $x \pm h$ stay inside the
    open interval.
    """
    h = step
    if bounds is not None:
        lo, hi = bounds
        h = min(step, 0.5 * (x - lo), 0.5 * (hi - x))
    return (f(x + h) - f(x - h)) / (2 * h)


def limit_step(x: float, dx: float, bounds: tuple[float, float]) -> float:
    """
    Limit step.

    Given a state (x) and a step (dx), the next state is expected to be
    (x+dx). When that falls outside the open interval **bounds** the step is
    cut so that the next state lies halfway between x and the bound crossed.
    """
    lo, hi = bounds
    if x + dx <= lo:
        return 0.5 * (lo - x)
    if x + dx >= hi:
        return 0.5 * (hi - x)
    return dx


def _evaluate(f, x, iteration):
    try:
        fx = float(f(x))
    except ArithmeticError as exc:
        raise FailedNewtonRaphson(
            "newton_raphson",
            f"could not calculate residual at {x:g} (iteration {iteration}): {exc}",
            x,
        ) from exc
    if not math.isfinite(fx):
        raise FailedNewtonRaphson(
            "newton_raphson",
            f"could not calculate residual at {x:g} (iteration {iteration})",
            x,
            fx,
        )
    return fx


def _converged(criterion, step, residual, threshold):
    if criterion == "step":
        return step < threshold
    if criterion == "residual":
        return residual < threshold
    return step < threshold and residual < threshold
