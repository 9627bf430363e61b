"""
capmesh - port point assignment and section decomposition for capacity-mesh PCB autorouting
"""

__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Stepwise solvers that turn a capacity mesh into per-connection routing inputs"

from .domain.models import (
    Coordinate, MeshNode, MeshEdge, NodePortSegment, AssignedPoint,
    NodeWithPortPoints, PortPoint, Connection, ConnectionPath, SectionTerminal
)
from .shared.exceptions import (
    CapMeshException, ConfigurationError, ValidationError, SolverError,
    SolverNotSolvedError, IterationBudgetExceededError, SolverFailedError
)
from .solvers import (
    BaseSolver, run_solver, SegmentToPointSolver, SingleSectionSolver,
    SectionPathingSolver, SectionHyperParameters
)
from .visualization import GraphicsObject

__all__ = [
    '__version__',

    # Domain records
    'Coordinate', 'MeshNode', 'MeshEdge', 'NodePortSegment', 'AssignedPoint',
    'NodeWithPortPoints', 'PortPoint', 'Connection', 'ConnectionPath',
    'SectionTerminal',

    # Solvers
    'BaseSolver', 'run_solver', 'SegmentToPointSolver', 'SingleSectionSolver',
    'SectionPathingSolver', 'SectionHyperParameters',

    # Errors
    'CapMeshException', 'ConfigurationError', 'ValidationError', 'SolverError',
    'SolverNotSolvedError', 'IterationBudgetExceededError', 'SolverFailedError',

    'GraphicsObject',
]
