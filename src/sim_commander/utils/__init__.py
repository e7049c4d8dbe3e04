"""
Sim Commander Utilities

This module provides utility functions and classes used throughout Sim Commander.
"""

from .logging import (
    setup_logging,
    get_logger,
    log_performance,
    log_startup,
)

from .error_handling import (
    SimCommanderError,
    ConfigurationError,
    ValidationError,
    DefinitionError,
    CommandNotFoundError,
    CommandMappingError,
    CommandExecutionError,
    CommandTimeoutError,
    BackendOperationNotSupported,
    handle_backend_operation,
    validate_input,
)

from .fuzzy_match import FuzzyMatcher, FuzzyMatchResult, levenshtein_distance

__all__ = [
    # Logging utilities
    "setup_logging",
    "get_logger",
    "log_performance",
    "log_startup",

    # Error handling utilities
    "SimCommanderError",
    "ConfigurationError",
    "ValidationError",
    "DefinitionError",
    "CommandNotFoundError",
    "CommandMappingError",
    "CommandExecutionError",
    "CommandTimeoutError",
    "BackendOperationNotSupported",
    "handle_backend_operation",
    "validate_input",

    # Fuzzy matching
    "FuzzyMatcher",
    "FuzzyMatchResult",
    "levenshtein_distance",
]
