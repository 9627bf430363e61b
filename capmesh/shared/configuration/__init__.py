"""Configuration management."""
from .config_manager import ConfigManager, get_config, initialize_config
from .settings import (
    SolverSettings, VisualizationSettings, LoggingSettings, ApplicationSettings
)

__all__ = [
    'ConfigManager', 'get_config', 'initialize_config',
    'SolverSettings', 'VisualizationSettings', 'LoggingSettings',
    'ApplicationSettings'
]
