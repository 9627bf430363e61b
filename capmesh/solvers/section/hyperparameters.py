"""Named tunables forwarded to section solvers."""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ...shared.configuration import get_config
from ...shared.utils.validation_utils import validate_non_negative_integer


@dataclass
class SectionHyperParameters:
    """Tunables for section extraction and the section pathing sub-solver.
    
    ``expansion_degrees`` is the hop radius around the focus node.
    ``shuffle_seed`` seeds the order in which the default sub-solver routes
    terminals; None keeps section order. Keys the extractor does not know
    about are kept in ``extra`` and forwarded.
    """
    expansion_degrees: Optional[int] = None
    shuffle_seed: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    
    def __post_init__(self):
        settings = get_config().settings.solver
        if self.expansion_degrees is None:
            self.expansion_degrees = settings.expansion_degrees
        if self.shuffle_seed is None:
            self.shuffle_seed = settings.shuffle_seed
        validate_non_negative_integer(self.expansion_degrees, 'expansion_degrees')
        if self.shuffle_seed is not None:
            validate_non_negative_integer(self.shuffle_seed, 'shuffle_seed')
    
    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'SectionHyperParameters':
        """Build from a mapping; keys are matched case-insensitively."""
        known = {}
        extra = {}
        for key, value in (data or {}).items():
            name = key.lower()
            if name in ('expansion_degrees', 'shuffle_seed'):
                known[name] = value
            else:
                extra[key] = value
        return cls(extra=extra, **known)
    
    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data['expansion_degrees'] = self.expansion_degrees
        data['shuffle_seed'] = self.shuffle_seed
        return data
