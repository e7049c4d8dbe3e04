"""
Integration tests for the instruction pipeline: text -> parse -> map -> execute.
"""

import pytest

from sim_commander.adapters.parser_to_orchestrator import ParserToOrchestrator
from sim_commander.core.commands.types import ErrorType
from sim_commander.orchestrator.backend import DryRunBackend
from sim_commander.orchestrator.orchestrator import InstructionOrchestrator
from sim_commander.orchestrator.types import CommandContext, CommandType
from sim_commander.utils.error_handling import CommandMappingError

from sim_commander.tests.conftest import RecordingBackend


@pytest.fixture
def orchestrator(dry_run_backend):
    return InstructionOrchestrator(dry_run_backend)


@pytest.mark.integration
class TestProcessInstruction:
    @pytest.mark.asyncio
    async def test_launch_app(self, orchestrator, dry_run_backend):
        result = await orchestrator.process_instruction("launch app com.apple.mobilesafari")

        assert result.success is True
        assert result.data == {"command": "launchApp", "parameters": {"bundle_id": "com.apple.mobilesafari"}}
        assert dry_run_backend.calls == [(CommandType.LAUNCH_APP, {"bundle_id": "com.apple.mobilesafari"})]

    @pytest.mark.asyncio
    async def test_numeric_parameters_reach_backend(self, orchestrator, dry_run_backend):
        await orchestrator.process_instruction("tap at 100, 200")

        assert dry_run_backend.calls == [(CommandType.TAP, {"x": 100, "y": 200})]

    @pytest.mark.asyncio
    async def test_spanish_instruction(self, orchestrator, dry_run_backend):
        result = await orchestrator.process_instruction("crear sesión con iPhone 15")

        assert result.success is True
        assert dry_run_backend.calls[0][0] is CommandType.CREATE_SIMULATOR_SESSION

    @pytest.mark.asyncio
    async def test_unknown_instruction(self, orchestrator, dry_run_backend):
        result = await orchestrator.process_instruction("list simulatrs")

        assert result.success is False
        assert result.type is ErrorType.COMMAND_NOT_FOUND
        assert result.suggestions[0] == "list simulators"
        assert result.error.startswith('Could not understand the instruction: "list simulatrs"')
        assert dry_run_backend.calls == []

    @pytest.mark.asyncio
    async def test_backend_failure(self, execution_config):
        from sim_commander.config.models import SimCommanderConfig

        orchestrator = InstructionOrchestrator(
            RecordingBackend(), SimCommanderConfig(execution=execution_config)
        )

        result = await orchestrator.process_instruction("list apps")

        assert result.success is False
        assert "simulator not booted" in result.error

    @pytest.mark.asyncio
    async def test_mapping_error_propagates(self, orchestrator):
        orchestrator.adapter = ParserToOrchestrator(mappings={})

        with pytest.raises(CommandMappingError):
            await orchestrator.process_instruction("list apps")

    @pytest.mark.asyncio
    async def test_context_collects_results(self, orchestrator):
        context = CommandContext(session_id="session-1")

        await orchestrator.process_instruction("list apps", context)

        assert len(context.previous_results) == 1


@pytest.mark.integration
class TestProcessSequence:
    @pytest.mark.asyncio
    async def test_sequence(self, orchestrator, dry_run_backend):
        result = await orchestrator.process_sequence([
            "create session with iPhone 15",
            "install app /tmp/Demo.app",
            "take screenshot",
        ])

        assert result.success is True
        assert len(result.data) == 3
        assert [call[0] for call in dry_run_backend.calls] == [
            CommandType.CREATE_SIMULATOR_SESSION,
            CommandType.INSTALL_APP,
            CommandType.CAPTURE_SCREEN,
        ]

    @pytest.mark.asyncio
    async def test_unknown_instruction_aborts_before_running(self, orchestrator, dry_run_backend):
        result = await orchestrator.process_sequence(["list apps", "juggle flaming torches"])

        assert result.success is False
        assert result.type is ErrorType.COMMAND_NOT_FOUND
        assert dry_run_backend.calls == []

    @pytest.mark.asyncio
    async def test_stop_on_error(self, execution_config):
        from sim_commander.config.models import SimCommanderConfig

        backend = RecordingBackend()
        orchestrator = InstructionOrchestrator(backend, SimCommanderConfig(execution=execution_config))

        result = await orchestrator.process_sequence(
            ["tap at 1, 2", "list apps", "launch app com.example.demo"], stop_on_error=True
        )

        assert result.success is False
        assert len(result.data) == 2
        assert [call[0] for call in backend.calls] == ["tap", "list_apps"]


class TestBuildCommand:
    def test_build_command(self):
        command = InstructionOrchestrator().build_command("press the home button")

        assert command.type is CommandType.PRESS_DEVICE_BUTTON
        assert command.parameters == {"button": "HOME"}

    def test_build_sequence(self):
        sequence = InstructionOrchestrator().build_sequence(["list apps", "list simulators"], stop_on_error=True)

        assert sequence.type is CommandType.SEQUENCE
        assert sequence.stop_on_error is True
        assert [c.type for c in sequence.commands] == [CommandType.LIST_APPS, CommandType.LIST_AVAILABLE_SIMULATORS]

    def test_default_backend_is_dry_run(self):
        assert isinstance(InstructionOrchestrator().executor.backend, DryRunBackend)
