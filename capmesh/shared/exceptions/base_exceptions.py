"""Base exceptions for capmesh."""


class CapMeshException(Exception):
    """Base exception class for capmesh."""
    
    def __init__(self, message: str, error_code: str = None, details: dict = None):
        """Initialize exception.
        
        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
    
    def __str__(self) -> str:
        """Return string representation of exception."""
        base_msg = super().__str__()
        if self.error_code:
            return f"[{self.error_code}] {base_msg}"
        return base_msg


class ConfigurationError(CapMeshException):
    """Exception raised for configuration-related errors."""
    pass


class ValidationError(CapMeshException):
    """Exception raised for invalid input records."""
    
    def __init__(self, message: str, field: str = None, value=None, **kwargs):
        """Initialize validation error.
        
        Args:
            message: Error message
            field: Field that failed validation
            value: Invalid value
        """
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class SolverError(CapMeshException):
    """Exception raised for errors surfaced by a stepwise solver."""
    
    def __init__(self, message: str, solver_name: str = None, **kwargs):
        """Initialize solver error.
        
        Args:
            message: Error message
            solver_name: Class name of the solver that raised
        """
        super().__init__(message, **kwargs)
        self.solver_name = solver_name
