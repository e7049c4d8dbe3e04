"""
Factory for orchestrator commands.
"""

from numbers import Real
from typing import Any, Dict, List, Optional

from .types import (
    CommandType,
    ConditionalCommand,
    OrchestratorCommand,
    Predicate,
    SequenceCommand,
)
from ..utils.error_handling import ValidationError, validate_input


def _check_retries(value):
    if value is not None and (isinstance(value, bool) or value < 0):
        raise ValueError("must be a non-negative integer")


def _check_timeout(value):
    if value is not None and (isinstance(value, bool) or value <= 0):
        raise ValueError("must be greater than zero")


def _validate_options(options: Dict[str, Any]) -> None:
    """Reject retry and timeout overrides the executor cannot honour."""
    validate_input(options.get("retries"), "retries", int, required=False, validator=_check_retries)
    validate_input(options.get("timeout"), "timeout", Real, required=False, validator=_check_timeout)


class CommandFactory:
    """Creates atomic, sequence and conditional commands with fresh ids."""

    def create_command(
        self,
        command_type: CommandType,
        parameters: Optional[Dict[str, Any]] = None,
        description: Optional[str] = None,
        **options
    ) -> OrchestratorCommand:
        """
        Create an atomic command.

        Args:
            command_type: Operation to run
            parameters: Operation arguments (copied)
            description: Human-readable description
            **options: timeout, retries, validate, transform_parameters, on_error

        Raises:
            ValidationError: If command_type is not a CommandType or is composite,
                or retries/timeout are out of range
        """
        validate_input(command_type, "command_type", CommandType)
        _validate_options(options)
        if command_type.is_composite:
            raise ValidationError(
                f"{command_type.value} commands must be built with create_sequence or create_conditional"
            )

        return OrchestratorCommand(
            type=command_type,
            parameters=dict(parameters or {}),
            description=description,
            **options
        )

    def create_sequence(
        self,
        commands: List[OrchestratorCommand],
        stop_on_error: bool = False,
        description: Optional[str] = None,
        **options
    ) -> SequenceCommand:
        validate_input(commands, "commands", list)
        _validate_options(options)
        for index, command in enumerate(commands):
            validate_input(command, f"commands[{index}]", OrchestratorCommand)

        return SequenceCommand(
            parameters={"commands": list(commands), "stop_on_error": stop_on_error},
            description=description or f"Sequence of {len(commands)} commands",
            **options
        )

    def create_conditional(
        self,
        condition: Predicate,
        if_true: OrchestratorCommand,
        if_false: Optional[OrchestratorCommand] = None,
        description: Optional[str] = None,
        **options
    ) -> ConditionalCommand:
        if not callable(condition):
            raise ValidationError("condition must be callable")
        validate_input(if_true, "if_true", OrchestratorCommand)
        validate_input(if_false, "if_false", OrchestratorCommand, required=False)
        _validate_options(options)

        parameters: Dict[str, Any] = {"condition": condition, "if_true": if_true}
        if if_false is not None:
            parameters["if_false"] = if_false

        return ConditionalCommand(
            parameters=parameters,
            description=description or "Conditional command",
            **options
        )
