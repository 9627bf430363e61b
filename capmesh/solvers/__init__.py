"""Stepwise solvers for port point assignment and section decomposition."""
from .base_solver import BaseSolver
from .driver import run_solver
from .segment_to_point import SegmentToPointSolver
from .section import (
    SectionHyperParameters, SectionPathingSolver, SectionSubSolver, SingleSectionSolver
)

__all__ = [
    'BaseSolver', 'run_solver', 'SegmentToPointSolver',
    'SectionHyperParameters', 'SectionPathingSolver', 'SectionSubSolver',
    'SingleSectionSolver'
]
