"""
Unified error handling utilities for Sim Commander.

This module provides the exception hierarchy shared by the parser, the
mapping layer and the executor, plus a decorator that standardizes how
backend calls report failures.
"""

import functools
import asyncio
import logging
from typing import Any, Callable, Optional, Type, Dict, List

from .logging import get_logger


class SimCommanderError(Exception):
    """Base exception for all Sim Commander errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SimCommanderError):
    """Configuration-related error."""
    pass


class ValidationError(SimCommanderError):
    """Input validation error."""
    pass


class DefinitionError(SimCommanderError):
    """A command definition is malformed and cannot be registered."""
    pass


class CommandNotFoundError(SimCommanderError):
    """No catalog pattern matched the instruction.

    Carries the enhanced error produced by the command registry so callers
    can render its suggestions verbatim.
    """

    def __init__(self, enhanced_error):
        super().__init__(enhanced_error.message, details=enhanced_error.to_dict())
        self.enhanced_error = enhanced_error

    @property
    def suggestions(self) -> List[str]:
        return list(self.enhanced_error.suggestions)

    @property
    def original_input(self) -> str:
        return self.enhanced_error.original_input


class CommandMappingError(SimCommanderError):
    """A parsed command name has no CommandType counterpart."""

    def __init__(self, command_name: str):
        super().__init__(
            f'Could not map command "{command_name}" to a CommandType',
            details={"command": command_name}
        )
        self.command_name = command_name


class CommandExecutionError(SimCommanderError):
    """Error raised while a backend executes a command."""
    pass


class CommandTimeoutError(CommandExecutionError):
    """A single execution attempt exceeded its time budget."""

    def __init__(self, message: str, timeout_seconds: Optional[float] = None):
        super().__init__(message, details={"error_type": "timeout", "timeout_seconds": timeout_seconds})
        self.timeout_seconds = timeout_seconds


class BackendOperationNotSupported(CommandExecutionError):
    """The backend has no operation for the requested command type."""
    pass


def handle_backend_operation(operation_name: str, logger: Optional[logging.Logger] = None):
    """
    Decorator to standardize backend error handling.

    Sim Commander errors pass through untouched, timeouts become
    CommandTimeoutError and anything else is wrapped in
    CommandExecutionError with the original error kept as the cause.

    Args:
        operation_name: Human-readable name of the operation
        logger: Optional logger instance (defaults to operation-specific logger)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            _logger = logger or get_logger(f"sim_commander.orchestrator.{operation_name}")

            try:
                _logger.debug(f"Starting {operation_name}")
                result = await func(*args, **kwargs)
                _logger.debug(f"{operation_name} completed successfully")
                return result

            except SimCommanderError:
                raise

            except asyncio.TimeoutError as e:
                _logger.error(f"{operation_name} timed out")
                raise CommandTimeoutError(f"{operation_name} timed out") from e

            except (ValueError, TypeError, KeyError) as e:
                _logger.error(f"{operation_name} failed - invalid parameters: {e}")
                raise CommandExecutionError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": "parameters", "original_error": str(e)}
                ) from e

            except Exception as e:
                _logger.error(f"{operation_name} failed - unexpected error: {e}", exc_info=True)
                raise CommandExecutionError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": "unexpected", "original_error": str(e)}
                ) from e

        return async_wrapper

    return decorator


def validate_input(
    data: Any,
    field_name: str,
    expected_type: Type = None,
    required: bool = True,
    validator: Optional[Callable] = None
) -> Any:
    """
    Standardized input validation utility.

    Args:
        data: The data to validate
        field_name: Name of the field being validated
        expected_type: Expected type of the data
        required: Whether the field is required
        validator: Optional custom validator function

    Returns:
        The validated data

    Raises:
        ValidationError: If validation fails
    """
    if required and data is None:
        raise ValidationError(f"{field_name} is required")

    if data is not None and expected_type and not isinstance(data, expected_type):
        raise ValidationError(
            f"{field_name} must be of type {expected_type.__name__}, got {type(data).__name__}"
        )

    if validator:
        try:
            return validator(data)
        except Exception as e:
            raise ValidationError(f"{field_name} validation failed: {e}") from e

    return data
