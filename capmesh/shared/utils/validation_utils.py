"""Validation utilities for capmesh input records."""
import math
from typing import Any

from ..exceptions import ValidationError


def validate_coordinates(x: Any, y: Any) -> None:
    """Validate coordinate values.
    
    Args:
        x: X coordinate
        y: Y coordinate
        
    Raises:
        ValidationError: If either value is not a finite number
    """
    for name, value in (('x', x), ('y', y)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(
                f"{name.upper()} coordinate must be numeric, got {type(value)}",
                field=name, value=value
            )
        if not math.isfinite(value):
            raise ValidationError(
                f"{name.upper()} coordinate must be finite, got {value}",
                field=name, value=value
            )


def validate_identifier(value: Any, field_name: str) -> None:
    """Validate a node, segment or connection identifier.
    
    Raises:
        ValidationError: If the identifier is not a non-empty string
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be string, got {type(value)}",
            field=field_name, value=value
        )
    
    if not value.strip():
        raise ValidationError(f"{field_name} cannot be empty", field=field_name, value=value)


def validate_non_negative_integer(value: Any, field_name: str) -> None:
    """Validate that a value is a non-negative integer.
    
    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{field_name} must be integer, got {type(value)}",
            field=field_name, value=value
        )
    
    if value < 0:
        raise ValidationError(
            f"{field_name} must be non-negative, got {value}",
            field=field_name, value=value
        )
