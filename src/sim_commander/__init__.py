"""
Sim Commander - natural language control of iOS simulators.

    from sim_commander import NLParser, InstructionOrchestrator

    parser = NLParser()
    parser.parse_instruction("launch app com.apple.mobilesafari")
"""

__version__ = "0.1.0"

from .core.commands import NLParser, CommandRegistry, ParseResult
from .orchestrator import (
    CommandType,
    CommandResult,
    CommandContext,
    CommandFactory,
    CommandExecutor,
    SimulatorBackend,
    DryRunBackend,
)
from .orchestrator.orchestrator import InstructionOrchestrator
from .adapters import ParserToOrchestrator
from .help import HelpSystem

__all__ = [
    "__version__",
    "NLParser",
    "CommandRegistry",
    "ParseResult",
    "CommandType",
    "CommandResult",
    "CommandContext",
    "CommandFactory",
    "CommandExecutor",
    "SimulatorBackend",
    "DryRunBackend",
    "InstructionOrchestrator",
    "ParserToOrchestrator",
    "HelpSystem",
]
