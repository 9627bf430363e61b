"""Settings dataclasses for capmesh."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class SolverSettings:
    """Defaults applied to solvers when the caller does not supply them."""
    max_iterations: int = 100_000
    expansion_degrees: int = 3
    shuffle_seed: Optional[int] = None
    
    def validate(self) -> List[str]:
        errors = []
        if not isinstance(self.max_iterations, int) or self.max_iterations <= 0:
            errors.append(f"max_iterations must be a positive integer, got {self.max_iterations}")
        if not isinstance(self.expansion_degrees, int) or self.expansion_degrees < 0:
            errors.append(f"expansion_degrees must be a non-negative integer, got {self.expansion_degrees}")
        if self.shuffle_seed is not None and (
                not isinstance(self.shuffle_seed, int) or self.shuffle_seed < 0):
            errors.append(f"shuffle_seed must be a non-negative integer or null, got {self.shuffle_seed}")
        return errors


@dataclass
class VisualizationSettings:
    """Debug snapshot styling."""
    z_offset_scale: float = 0.05
    node_opacity: float = 0.001
    dash_pattern: str = "5 5"
    marker_color: str = "rgba(0, 0, 0, 0.25)"
    default_connection_color: str = "#000"
    
    def validate(self) -> List[str]:
        errors = []
        if self.z_offset_scale < 0:
            errors.append(f"z_offset_scale must be non-negative, got {self.z_offset_scale}")
        if not 0.0 <= self.node_opacity <= 1.0:
            errors.append(f"node_opacity must be between 0 and 1, got {self.node_opacity}")
        return errors


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = False
    file_output: bool = False
    log_file: str = "logs/capmesh.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    component_levels: Dict[str, str] = field(default_factory=dict)
    
    def validate(self) -> List[str]:
        errors = []
        if self.level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.level}")
        for component, level in self.component_levels.items():
            if level.upper() not in VALID_LOG_LEVELS:
                errors.append(f"Invalid log level for {component}: {level}")
        if self.max_file_size_mb <= 0:
            errors.append("max_file_size_mb must be positive")
        return errors


@dataclass
class ApplicationSettings:
    """Top-level settings container."""
    version: str = "0.1.0"
    config_version: int = 1
    solver: SolverSettings = field(default_factory=SolverSettings)
    visualization: VisualizationSettings = field(default_factory=VisualizationSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    
    def validate(self) -> Dict[str, List[str]]:
        """Validate every settings category.
        
        Returns:
            Mapping of category name to a (possibly empty) list of errors
        """
        return {
            'solver': self.solver.validate(),
            'visualization': self.visualization.validate(),
            'logging': self.logging.validate(),
        }
