"""Shared exceptions for capmesh."""
from .base_exceptions import (
    CapMeshException, ConfigurationError, ValidationError, SolverError
)
from .domain_exceptions import (
    SolverNotSolvedError, IterationBudgetExceededError, SolverFailedError
)

__all__ = [
    'CapMeshException', 'ConfigurationError', 'ValidationError', 'SolverError',
    'SolverNotSolvedError', 'IterationBudgetExceededError', 'SolverFailedError'
]
