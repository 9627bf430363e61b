"""Stepwise solver lifecycle shared by every capmesh solver."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..shared.configuration import get_config
from ..shared.exceptions import SolverError
from ..shared.utils.logging_utils import get_context_logger
from ..visualization.graphics import GraphicsObject

logger = logging.getLogger(__name__)


class BaseSolver(ABC):
    """Incrementally steppable solver.
    
    A solver starts unsolved and moves exactly once to either ``solved`` or
    ``failed`` (with ``error`` set). Callers drive it by calling ``step()``;
    the iteration cap is enforced by the driver loop, not here.
    """
    
    def __init__(self, max_iterations: Optional[int] = None):
        self.solved = False
        self.failed = False
        self.error: Optional[str] = None
        self.iterations = 0
        self.max_iterations = (
            max_iterations if max_iterations is not None
            else get_config().settings.solver.max_iterations
        )
        self.time_to_solve: Optional[float] = None
        self.stats: Dict[str, Any] = {}
        self.log = get_context_logger(type(self).__module__, solver=type(self).__name__)
    
    @property
    def is_finished(self) -> bool:
        return self.solved or self.failed
    
    @property
    def progress(self) -> float:
        """Fraction of work completed, in [0, 1]."""
        return 1.0 if self.solved else 0.0
    
    def step(self) -> None:
        """Perform one bounded unit of work. No-op once finished."""
        if self.is_finished:
            return
        
        self.iterations += 1
        try:
            self._step()
        except Exception as e:
            self.failed = True
            self.error = f"{type(self).__name__} error: {e}"
            self.log.error(f"Step {self.iterations} raised: {e}")
            raise SolverError(self.error, solver_name=type(self).__name__) from e
    
    @abstractmethod
    def _step(self) -> None:
        """Subclass hook performing the actual work of one step."""
        pass
    
    def solve(self) -> 'BaseSolver':
        """Step until finished, bounded by ``max_iterations``."""
        from .driver import run_solver
        return run_solver(self)
    
    def get_constructor_params(self) -> Dict[str, Any]:
        """Plain-data snapshot of the inputs, enough to rebuild the solver."""
        return {}
    
    def visualize(self) -> GraphicsObject:
        """Debug snapshot of internal state. Has no effect on solving."""
        return GraphicsObject(title=type(self).__name__)
    
    def __repr__(self) -> str:
        state = 'solved' if self.solved else 'failed' if self.failed else 'unsolved'
        return f"<{type(self).__name__} {state} iterations={self.iterations}>"
