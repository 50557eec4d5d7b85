"""
Core module for EdgeCon.
Provides error handling, logging and configuration.
"""
from edgecon.core.errors import (
    EdgeConError, ValidationError, ConfigError, GraphError,
    ReductionError, SolverError, DecodeError
)
from edgecon.core.logging import get_logger
from edgecon.core.config import ReductionConfig, ROOT_COMPONENT

__all__ = [
    "EdgeConError", "ValidationError", "ConfigError", "GraphError",
    "ReductionError", "SolverError", "DecodeError",
    "get_logger",
    "ReductionConfig", "ROOT_COMPONENT"
]
