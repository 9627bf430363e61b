"""Contract between the section extractor and the solver it drives."""
from typing import Dict, List, Optional, Protocol, runtime_checkable

from ...domain.models import MeshEdge, MeshNode, SectionTerminal
from .hyperparameters import SectionHyperParameters


@runtime_checkable
class SectionSubSolver(Protocol):
    """Anything the extractor can step and observe.
    
    Only ``step()`` and the three state fields are used.
    """
    solved: bool
    failed: bool
    error: Optional[str]
    
    def step(self) -> None: ...


class SectionSubSolverFactory(Protocol):
    """Callable building a sub-solver from an extracted section."""
    
    def __call__(self, *,
                 section_connection_terminals: List[SectionTerminal],
                 section_nodes: List[MeshNode],
                 section_edges: List[MeshEdge],
                 color_map: Dict[str, str],
                 hyper_parameters: SectionHyperParameters) -> SectionSubSolver: ...
