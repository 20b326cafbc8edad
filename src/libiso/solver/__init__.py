from .nr import SolverState, limit_step, newton_raphson, numeric_derivative  # noqa: F401

__all__ = ["SolverState", "limit_step", "newton_raphson", "numeric_derivative"]
