"""Driver loop that steps a solver to completion under an iteration cap."""
import logging
from typing import Optional

from ..shared.exceptions import IterationBudgetExceededError, SolverFailedError
from ..shared.utils.performance_utils import timing_context
from .base_solver import BaseSolver

logger = logging.getLogger(__name__)


def run_solver(solver: BaseSolver, max_iterations: Optional[int] = None,
               raise_on_failure: bool = True) -> BaseSolver:
    """Call ``solver.step()`` until it is solved, failed, or out of budget.
    
    Args:
        solver: Solver to drive
        max_iterations: Iteration cap; defaults to ``solver.max_iterations``
        raise_on_failure: Raise SolverFailedError if the solver fails on its own
        
    Returns:
        The same solver, finished
        
    Raises:
        IterationBudgetExceededError: The cap was reached before a terminal state
        SolverFailedError: The solver failed and ``raise_on_failure`` is set
    """
    name = type(solver).__name__
    budget = solver.max_iterations if max_iterations is None else max_iterations
    
    with timing_context(name) as timing:
        while not solver.is_finished and solver.iterations < budget:
            solver.step()
    solver.time_to_solve = timing['elapsed_s']
    solver.stats['rss_mb'] = timing['rss_mb']
    
    if not solver.is_finished:
        solver.failed = True
        solver.error = f"{name} ran out of iterations"
        logger.error(f"{name} exceeded iteration budget of {budget}")
        raise IterationBudgetExceededError(
            solver.error, solver_name=name,
            iterations=solver.iterations, max_iterations=budget
        )
    
    if solver.failed:
        logger.warning(f"{name} failed after {solver.iterations} iterations: {solver.error}")
        if raise_on_failure:
            raise SolverFailedError(solver.error, solver_name=name)
        return solver
    
    logger.info(
        f"{name} solved in {solver.iterations} iterations "
        f"({solver.time_to_solve:.3f}s, rss={timing['rss_mb']:.1f}MB)"
    )
    return solver
