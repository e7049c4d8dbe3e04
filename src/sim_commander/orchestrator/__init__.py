"""
Command model, backend interface and execution for Sim Commander.

The text-to-result pipeline lives in ``orchestrator.orchestrator`` and is not
imported here because it depends on the adapters package, which in turn
depends on this one.
"""

from .types import (
    CommandType,
    CommandResult,
    CommandContext,
    OrchestratorCommand,
    SequenceCommand,
    ConditionalCommand,
)
from .factory import CommandFactory
from .backend import SimulatorBackend, DryRunBackend, operation_name
from .executor import CommandExecutor

__all__ = [
    "CommandType",
    "CommandResult",
    "CommandContext",
    "OrchestratorCommand",
    "SequenceCommand",
    "ConditionalCommand",
    "CommandFactory",
    "SimulatorBackend",
    "DryRunBackend",
    "operation_name",
    "CommandExecutor",
]
