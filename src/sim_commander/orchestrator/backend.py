"""
Device-control backend interface.

A backend exposes one coroutine per non-composite CommandType, named after
the enum member in lowercase (``CommandType.LAUNCH_APP`` -> ``launch_app``),
each taking the parameter dict. ``dispatch`` routes a command to it.
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from .types import CommandType
from ..utils.error_handling import BackendOperationNotSupported, handle_backend_operation
from ..utils.logging import get_logger

Operation = Callable[[Dict[str, Any]], Awaitable[Any]]


def operation_name(command_type: CommandType) -> str:
    return command_type.name.lower()


class SimulatorBackend:
    """
    Base class for backends.

    Subclasses implement the operations they support, e.g.::

        class MyBackend(SimulatorBackend):
            async def tap(self, parameters):
                ...
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def _resolve(self, command_type: CommandType) -> Optional[Operation]:
        if command_type.is_composite:
            return None
        operation = getattr(self, operation_name(command_type), None)
        return operation if callable(operation) else None

    def supports(self, command_type: CommandType) -> bool:
        return self._resolve(command_type) is not None

    def supported_operations(self) -> List[CommandType]:
        return [command_type for command_type in CommandType if self.supports(command_type)]

    @handle_backend_operation("dispatch")
    async def dispatch(self, command_type: CommandType, parameters: Dict[str, Any]) -> Any:
        """
        Run the operation for command_type.

        Raises:
            BackendOperationNotSupported: If the backend lacks the operation
            CommandExecutionError: If the operation fails
        """
        operation = self._resolve(command_type)
        if operation is None:
            raise BackendOperationNotSupported(
                f"Backend {type(self).__name__} does not support {command_type.value}",
                details={"error_type": "unsupported", "command": command_type.value}
            )
        return await operation(parameters)


class DryRunBackend(SimulatorBackend):
    """Backend that performs nothing and echoes every call back."""

    def __init__(self):
        super().__init__()
        self.calls: List[Tuple[CommandType, Dict[str, Any]]] = []

    def _resolve(self, command_type: CommandType) -> Optional[Operation]:
        if command_type.is_composite:
            return None

        async def echo(parameters: Dict[str, Any]) -> Dict[str, Any]:
            self.calls.append((command_type, dict(parameters)))
            self.logger.info(f"[dry-run] {command_type.value} {parameters}")
            return {"command": command_type.value, "parameters": dict(parameters)}

        return echo
