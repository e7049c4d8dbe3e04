"""
Command executor.

Runs atomic commands against a backend with validation, parameter
transformation, per-attempt timeouts and retries, and drives sequence and
conditional composites.
"""

import asyncio
import inspect
from typing import Any, Dict, List, Optional

from .backend import SimulatorBackend
from .types import (
    CommandContext,
    CommandResult,
    CommandType,
    ConditionalCommand,
    OrchestratorCommand,
    SequenceCommand,
)
from ..config.models import ExecutionConfig
from ..core.commands.types import ErrorType
from ..utils.error_handling import (
    BackendOperationNotSupported,
    CommandTimeoutError,
    SimCommanderError,
)
from ..utils.logging import get_logger, log_performance


async def _resolve(value: Any) -> Any:
    """Await hook results that are awaitable, pass plain values through."""
    if inspect.isawaitable(value):
        return await value
    return value


class CommandExecutor:
    """
    Executes orchestrator commands.

    Every result, including those of sub-commands, is recorded in
    ``context.previous_results`` under the command id.
    """

    def __init__(self, backend: SimulatorBackend, config: Optional[ExecutionConfig] = None):
        self.backend = backend
        self.config = config or ExecutionConfig()
        self.logger = get_logger(__name__)

    async def execute(self, command: OrchestratorCommand,
                      context: Optional[CommandContext] = None) -> CommandResult:
        """
        Execute any command.

        Args:
            command: Atomic, sequence or conditional command
            context: Shared execution context (a fresh one when omitted)

        Returns:
            CommandResult; for sequences ``data`` holds the sub-results
        """
        context = context if context is not None else CommandContext()

        if command.type is CommandType.SEQUENCE:
            results = await self.execute_sequence(command, context)
            failed = [result for result in results if not result.success]
            result = CommandResult(
                success=not failed,
                data=results,
                error=f"{len(failed)} of {len(results)} commands failed" if failed else None,
            )
        elif command.type is CommandType.CONDITIONAL:
            result = await self._execute_conditional(command, context)
        else:
            result = await self._execute_atomic(command, context)

        context.previous_results[command.id] = result
        return result

    async def execute_sequence(self, command: SequenceCommand,
                               context: Optional[CommandContext] = None) -> List[CommandResult]:
        """Run sub-commands in order and return one result per executed sub-command."""
        context = context if context is not None else CommandContext()
        stop_on_error = command.stop_on_error
        results: List[CommandResult] = []

        for sub_command in command.commands:
            result = await self.execute(sub_command, context)
            results.append(result)
            if stop_on_error and not result.success:
                self.logger.info(
                    f"Sequence {command.id} stopped after failed command {sub_command.id}"
                )
                break

        return results

    async def _execute_conditional(self, command: ConditionalCommand,
                                   context: CommandContext) -> CommandResult:
        try:
            outcome = await _resolve(command.condition(context))
        except Exception as e:
            self.logger.error(f"Condition of {command.id} raised: {e}")
            return CommandResult(success=False, error=f"Condition evaluation failed: {e}")

        branch = command.if_true if outcome else command.if_false
        if branch is None:
            self.logger.debug(f"Condition of {command.id} is false and no alternative is set")
            return CommandResult(success=True)

        return await self.execute(branch, context)

    async def _execute_atomic(self, command: OrchestratorCommand,
                              context: CommandContext) -> CommandResult:
        try:
            if command.validate is not None:
                is_valid = await _resolve(command.validate(context))
                if not is_valid:
                    self.logger.warning(f"Validation failed for {command.type.value} ({command.id})")
                    return CommandResult(
                        success=False,
                        error=f"Validation failed for command {command.type.value}",
                        type=ErrorType.VALIDATION_FAILED,
                    )

            parameters = command.parameters
            if command.transform_parameters is not None:
                parameters = await _resolve(command.transform_parameters(context))

        except Exception as e:
            self.logger.error(f"Hook of {command.type.value} ({command.id}) raised: {e}")
            return await self._handle_failure(command, e, context)

        try:
            with log_performance(f"{command.type.value} ({command.id})"):
                data = await self._execute_with_retry(command, parameters)
        except SimCommanderError as e:
            return await self._handle_failure(command, e, context)

        return CommandResult(success=True, data=data)

    async def _execute_with_retry(self, command: OrchestratorCommand,
                                  parameters: Dict[str, Any]) -> Any:
        retries = command.retries if command.retries is not None else self.config.default_retries
        # Commands built without the factory may carry a negative count
        retries = max(retries, 0)
        timeout = command.timeout if command.timeout is not None else self.config.default_timeout_seconds
        last_exception: Optional[SimCommanderError] = None

        for attempt in range(retries + 1):
            try:
                if attempt > 0:
                    self.logger.warning(
                        f"Retrying {command.type.value} ({command.id}), attempt {attempt + 1} of {retries + 1}"
                    )
                    await asyncio.sleep(self.config.retry_delay_seconds)

                return await self._dispatch_once(command.type, parameters, timeout)

            except BackendOperationNotSupported:
                # Retrying cannot make an operation appear
                raise

            except SimCommanderError as e:
                last_exception = e
                self.logger.warning(
                    f"{command.type.value} ({command.id}) failed on attempt {attempt + 1}: {e}"
                )

        raise last_exception

    async def _dispatch_once(self, command_type: CommandType, parameters: Dict[str, Any],
                             timeout: Optional[float]) -> Any:
        try:
            return await asyncio.wait_for(
                self.backend.dispatch(command_type, parameters),
                timeout=timeout
            )
        except asyncio.TimeoutError as e:
            raise CommandTimeoutError(
                f"{command_type.value} timed out after {timeout}s", timeout_seconds=timeout
            ) from e

    async def _handle_failure(self, command: OrchestratorCommand, error: Exception,
                              context: CommandContext) -> CommandResult:
        if command.on_error is not None:
            self.logger.info(f"Delegating failure of {command.type.value} ({command.id}) to on_error")
            try:
                return await _resolve(command.on_error(error, context))
            except Exception as e:
                self.logger.error(f"on_error of {command.type.value} ({command.id}) raised: {e}")
                return CommandResult(success=False, error=f"Error handler failed: {e}")

        self.logger.error(f"{command.type.value} ({command.id}) failed: {error}")
        return CommandResult(success=False, error=str(error))
