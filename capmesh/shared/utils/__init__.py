"""Shared utilities."""
from .logging_utils import configure_logging, get_context_logger, ContextLogger
from .validation_utils import (
    validate_coordinates, validate_identifier, validate_non_negative_integer
)
from .performance_utils import timing_context, memory_usage_mb

__all__ = [
    'configure_logging', 'get_context_logger', 'ContextLogger',
    'validate_coordinates', 'validate_identifier', 'validate_non_negative_integer',
    'timing_context', 'memory_usage_mb'
]
