"""Solver lifecycle exceptions."""
from .base_exceptions import SolverError


class SolverNotSolvedError(SolverError):
    """Raised when a result is requested from a solver that has not solved."""
    
    def __init__(self, message: str, solver_name: str = None, **kwargs):
        kwargs.setdefault('error_code', 'PRECONDITION_VIOLATION')
        super().__init__(message, solver_name=solver_name, **kwargs)


class IterationBudgetExceededError(SolverError):
    """Raised by the driver loop when a solver exhausts its iteration cap.
    
    This is fatal for the run; callers decide whether to retry with
    different hyperparameters.
    """
    
    def __init__(self, message: str, solver_name: str = None,
                 iterations: int = None, max_iterations: int = None, **kwargs):
        kwargs.setdefault('error_code', 'ITERATION_BUDGET_EXCEEDED')
        super().__init__(message, solver_name=solver_name, **kwargs)
        self.iterations = iterations
        self.max_iterations = max_iterations


class SolverFailedError(SolverError):
    """Raised by the driver loop when a solver reaches its failed state."""
    
    def __init__(self, message: str, solver_name: str = None, **kwargs):
        kwargs.setdefault('error_code', 'SOLVER_FAILED')
        super().__init__(message, solver_name=solver_name, **kwargs)
