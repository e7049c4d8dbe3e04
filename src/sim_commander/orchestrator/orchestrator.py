"""
Instruction pipeline: text -> parse -> map -> execute.
"""

from typing import List, Optional

from .backend import SimulatorBackend, DryRunBackend
from .executor import CommandExecutor
from .factory import CommandFactory
from .types import CommandContext, CommandResult, OrchestratorCommand
from ..adapters.parser_to_orchestrator import ParserToOrchestrator
from ..config.models import SimCommanderConfig
from ..core.commands.parser import NLParser
from ..core.commands.types import ErrorType
from ..utils.error_handling import CommandNotFoundError
from ..utils.logging import get_logger


class InstructionOrchestrator:
    """
    Executes natural language instructions end to end.

    Parse failures are reported as unsuccessful results carrying the
    registry's suggestions. Mapping failures propagate as
    CommandMappingError.
    """

    def __init__(
        self,
        backend: Optional[SimulatorBackend] = None,
        config: Optional[SimCommanderConfig] = None,
        parser: Optional[NLParser] = None,
        factory: Optional[CommandFactory] = None
    ):
        self.config = config or SimCommanderConfig()
        self.parser = parser or NLParser(self.config.suggestions)
        self.factory = factory or CommandFactory()
        self.adapter = ParserToOrchestrator(self.factory)
        self.executor = CommandExecutor(backend or DryRunBackend(), self.config.execution)
        self.logger = get_logger(__name__)

    def build_command(self, instruction: str) -> OrchestratorCommand:
        """Parse and map an instruction without executing it."""
        parse_result = self.parser.parse_instruction(instruction)
        return self.adapter.convert_to_command(parse_result)

    def build_sequence(self, instructions: List[str], stop_on_error: bool = False) -> OrchestratorCommand:
        commands = [self.build_command(instruction) for instruction in instructions]
        return self.factory.create_sequence(commands, stop_on_error=stop_on_error)

    @staticmethod
    def _not_found_result(error: CommandNotFoundError) -> CommandResult:
        return CommandResult(
            success=False,
            error=error.message,
            suggestions=error.suggestions,
            type=ErrorType.COMMAND_NOT_FOUND,
        )

    async def process_instruction(self, instruction: str,
                                  context: Optional[CommandContext] = None) -> CommandResult:
        """Parse, map and execute one instruction."""
        try:
            command = self.build_command(instruction)
        except CommandNotFoundError as e:
            return self._not_found_result(e)

        self.logger.info(f"Executing {command.type.value} for '{instruction.strip()}'")
        return await self.executor.execute(command, context)

    async def process_sequence(self, instructions: List[str], stop_on_error: bool = False,
                               context: Optional[CommandContext] = None) -> CommandResult:
        """
        Execute several instructions as one sequence.

        Every instruction is parsed before anything runs; an unrecognized
        instruction aborts the whole sequence with its suggestions.
        """
        try:
            sequence = self.build_sequence(instructions, stop_on_error)
        except CommandNotFoundError as e:
            return self._not_found_result(e)

        return await self.executor.execute(sequence, context)
