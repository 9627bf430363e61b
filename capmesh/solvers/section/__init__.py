"""Section decomposition: extract a bounded-hop subgraph and path inside it."""
from .hyperparameters import SectionHyperParameters
from .interfaces import SectionSubSolver, SectionSubSolverFactory
from .pathing import SectionPathingSolver
from .single_section import SingleSectionSolver

__all__ = [
    'SectionHyperParameters', 'SectionSubSolver', 'SectionSubSolverFactory',
    'SectionPathingSolver', 'SingleSectionSolver'
]
