class EdgeConError(Exception):
    """Base exception for all EdgeCon related errors."""
    pass

class ValidationError(EdgeConError):
    """Raised when arguments to a reduction fail validation."""
    pass

class ConfigError(EdgeConError):
    """Raised when a configuration file cannot be read or parsed."""
    pass

class GraphError(EdgeConError):
    """Raised when a graph is malformed or queried with unknown nodes."""
    pass

class ReductionError(EdgeConError):
    """Raised when building the reduction formula fails."""
    pass

class SolverError(EdgeConError):
    """Raised when the SAT backend cannot compile or solve a formula."""
    pass

class DecodeError(EdgeConError):
    """Raised when a model is decoded without a prior SAT result."""
    pass
