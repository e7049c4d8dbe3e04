"""
Test suite for CommandExecutor.

Covers retries, timeouts, hooks, sequences and conditionals against the
RecordingBackend double from conftest.
"""

import asyncio

import pytest

from sim_commander.core.commands.types import ErrorType
from sim_commander.orchestrator.executor import CommandExecutor
from sim_commander.orchestrator.types import CommandContext, CommandResult, CommandType, OrchestratorCommand
from sim_commander.utils.error_handling import CommandExecutionError, CommandTimeoutError

from sim_commander.tests.conftest import RecordingBackend


class TestAtomicExecution:
    """Single command execution."""

    @pytest.mark.asyncio
    async def test_success(self, executor, factory, recording_backend):
        command = factory.create_command(CommandType.TAP, {"x": 10, "y": 20})

        result = await executor.execute(command)

        assert result.success is True
        assert result.data == {"tapped": [10, 20]}
        assert result.error is None
        assert recording_backend.calls == [("tap", {"x": 10, "y": 20})]

    @pytest.mark.asyncio
    async def test_backend_failure_becomes_result(self, executor, factory):
        result = await executor.execute(factory.create_command(CommandType.LIST_APPS))

        assert result.success is False
        assert "simulator not booted" in result.error

    @pytest.mark.asyncio
    async def test_unsupported_operation(self, execution_config, factory):
        backend = RecordingBackend()
        executor = CommandExecutor(backend, execution_config)
        command = factory.create_command(CommandType.OPEN_URL, {"url": "https://example.com"}, retries=3)

        result = await executor.execute(command)

        assert result.success is False
        assert "does not support openUrl" in result.error
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_result_recorded_in_context(self, executor, factory):
        context = CommandContext()
        command = factory.create_command(CommandType.TAP, {"x": 1, "y": 1})

        result = await executor.execute(command, context)

        assert context.previous_results[command.id] is result

    @pytest.mark.asyncio
    async def test_timestamp_is_epoch_millis(self, executor, factory):
        result = await executor.execute(factory.create_command(CommandType.TAP, {"x": 1, "y": 1}))

        assert result.timestamp > 1_000_000_000_000


class TestRetriesAndTimeouts:
    @pytest.mark.asyncio
    async def test_negative_retries_run_once(self, execution_config):
        backend = RecordingBackend()
        executor = CommandExecutor(backend, execution_config)
        command = OrchestratorCommand(type=CommandType.LIST_APPS, retries=-1)

        result = await executor.execute(command)

        assert result.success is False
        assert len(backend.calls) == 1

    @pytest.mark.asyncio
    async def test_retries_until_success(self, execution_config, factory):
        backend = RecordingBackend(tap_failures=2)
        executor = CommandExecutor(backend, execution_config)

        result = await executor.execute(factory.create_command(CommandType.TAP, {"x": 5, "y": 6}, retries=2))

        assert result.success is True
        assert len(backend.calls) == 3

    @pytest.mark.asyncio
    async def test_retries_exhausted(self, execution_config, factory):
        backend = RecordingBackend(tap_failures=5)
        executor = CommandExecutor(backend, execution_config)

        result = await executor.execute(factory.create_command(CommandType.TAP, {"x": 5, "y": 6}, retries=1))

        assert result.success is False
        assert "touch event rejected" in result.error
        assert len(backend.calls) == 2

    @pytest.mark.asyncio
    async def test_default_retries_from_config(self, factory):
        from sim_commander.config.models import ExecutionConfig

        backend = RecordingBackend(tap_failures=1)
        executor = CommandExecutor(backend, ExecutionConfig(default_retries=1, retry_delay_seconds=0.0))

        result = await executor.execute(factory.create_command(CommandType.TAP, {"x": 5, "y": 6}))

        assert result.success is True
        assert len(backend.calls) == 2

    @pytest.mark.asyncio
    async def test_timeout(self, execution_config, factory):
        backend = RecordingBackend(launch_delay=0.2)
        executor = CommandExecutor(backend, execution_config)
        command = factory.create_command(CommandType.LAUNCH_APP, {"bundle_id": "com.example.demo"}, timeout=0.05)

        result = await executor.execute(command)

        assert result.success is False
        assert "timed out" in result.error

    @pytest.mark.asyncio
    async def test_timeout_applies_per_attempt(self, execution_config, factory):
        backend = RecordingBackend(launch_delay=0.2)
        executor = CommandExecutor(backend, execution_config)
        command = factory.create_command(
            CommandType.LAUNCH_APP, {"bundle_id": "com.example.demo"}, timeout=0.05, retries=1
        )

        result = await executor.execute(command)

        assert result.success is False
        assert len(backend.calls) == 2


class TestHooks:
    """validate, transform_parameters and on_error."""

    @pytest.mark.asyncio
    async def test_validation_failure(self, executor, factory, recording_backend):
        calls = []

        def validate(context):
            calls.append(context)
            return False

        command = factory.create_command(CommandType.TAP, {"x": 1, "y": 1}, retries=3, validate=validate)

        result = await executor.execute(command)

        assert result.success is False
        assert result.type is ErrorType.VALIDATION_FAILED
        assert len(calls) == 1
        assert recording_backend.calls == []

    @pytest.mark.asyncio
    async def test_async_validation(self, executor, factory):
        async def validate(context):
            return True

        result = await executor.execute(
            factory.create_command(CommandType.TAP, {"x": 1, "y": 1}, validate=validate)
        )

        assert result.success is True

    @pytest.mark.asyncio
    async def test_transform_runs_once(self, execution_config, factory):
        backend = RecordingBackend(tap_failures=1)
        executor = CommandExecutor(backend, execution_config)
        transforms = []

        def transform(context):
            transforms.append(context)
            return {"x": 42, "y": context.variables["y"]}

        context = CommandContext(variables={"y": 7})
        command = factory.create_command(
            CommandType.TAP, {"x": 0, "y": 0}, retries=1, transform_parameters=transform
        )

        result = await executor.execute(command, context)

        assert result.success is True
        assert result.data == {"tapped": [42, 7]}
        assert len(transforms) == 1
        assert backend.calls == [("tap", {"x": 42, "y": 7}), ("tap", {"x": 42, "y": 7})]

    @pytest.mark.asyncio
    async def test_sync_on_error(self, executor, factory):
        seen = []

        def on_error(error, context):
            seen.append(error)
            return CommandResult(success=True, data="recovered")

        result = await executor.execute(factory.create_command(CommandType.LIST_APPS, on_error=on_error))

        assert result.success is True
        assert result.data == "recovered"
        assert isinstance(seen[0], CommandExecutionError)

    @pytest.mark.asyncio
    async def test_async_on_error(self, execution_config, factory):
        backend = RecordingBackend(launch_delay=0.2)
        executor = CommandExecutor(backend, execution_config)

        async def on_error(error, context):
            await asyncio.sleep(0)
            return CommandResult(success=False, error=f"handled: {type(error).__name__}")

        command = factory.create_command(
            CommandType.LAUNCH_APP, {"bundle_id": "com.example.demo"}, timeout=0.05, on_error=on_error
        )

        result = await executor.execute(command)

        assert result.error == f"handled: {CommandTimeoutError.__name__}"

    @pytest.mark.asyncio
    async def test_raising_hook_goes_to_on_error(self, executor, factory):
        def transform(context):
            raise KeyError("device")

        def on_error(error, context):
            return CommandResult(success=False, error=f"hook failed: {error!r}")

        command = factory.create_command(CommandType.TAP, transform_parameters=transform, on_error=on_error)

        result = await executor.execute(command)

        assert result.error == "hook failed: KeyError('device')"

    @pytest.mark.asyncio
    async def test_raising_validate_without_handler(self, executor, factory):
        def validate(context):
            raise RuntimeError("no session")

        result = await executor.execute(factory.create_command(CommandType.TAP, validate=validate))

        assert result.success is False
        assert result.error == "no session"


class TestSequences:
    def _commands(self, factory):
        return [
            factory.create_command(CommandType.TAP, {"x": 1, "y": 1}),
            factory.create_command(CommandType.LIST_APPS),
            factory.create_command(CommandType.LAUNCH_APP, {"bundle_id": "com.example.demo"}),
        ]

    @pytest.mark.asyncio
    async def test_stop_on_error(self, executor, factory, recording_backend):
        sequence = factory.create_sequence(self._commands(factory), stop_on_error=True)

        results = await executor.execute_sequence(sequence)

        assert [result.success for result in results] == [True, False]
        assert [call[0] for call in recording_backend.calls] == ["tap", "list_apps"]

    @pytest.mark.asyncio
    async def test_continue_on_error(self, executor, factory):
        sequence = factory.create_sequence(self._commands(factory))

        results = await executor.execute_sequence(sequence)

        assert [result.success for result in results] == [True, False, True]

    @pytest.mark.asyncio
    async def test_raising_on_error_does_not_abort_sequence(self, executor, factory):
        def on_error(error, context):
            raise RuntimeError("boom")

        commands = self._commands(factory)
        commands[1].on_error = on_error

        results = await executor.execute_sequence(factory.create_sequence(commands))

        assert [result.success for result in results] == [True, False, True]
        assert results[1].error == "Error handler failed: boom"

    @pytest.mark.asyncio
    async def test_sequence_result(self, executor, factory):
        sequence = factory.create_sequence(self._commands(factory))
        context = CommandContext()

        result = await executor.execute(sequence, context)

        assert result.success is False
        assert result.error == "1 of 3 commands failed"
        assert len(result.data) == 3
        assert len(context.previous_results) == 4
        assert context.previous_results[sequence.id] is result

    @pytest.mark.asyncio
    async def test_successful_sequence(self, executor, factory):
        sequence = factory.create_sequence([
            factory.create_command(CommandType.TAP, {"x": 1, "y": 1}),
            factory.create_command(CommandType.TAP, {"x": 2, "y": 2}),
        ])

        result = await executor.execute(sequence)

        assert result.success is True
        assert result.error is None
        assert [item.data for item in result.data] == [{"tapped": [1, 1]}, {"tapped": [2, 2]}]

    @pytest.mark.asyncio
    async def test_empty_sequence(self, executor, factory):
        result = await executor.execute(factory.create_sequence([]))

        assert result.success is True
        assert result.data == []

    @pytest.mark.asyncio
    async def test_later_command_sees_earlier_result(self, executor, factory):
        first = factory.create_command(CommandType.TAP, {"x": 3, "y": 4})
        second = factory.create_command(
            CommandType.TAP,
            transform_parameters=lambda context: {
                "x": context.previous_results[first.id].data["tapped"][0] + 1, "y": 0
            },
        )

        result = await executor.execute(factory.create_sequence([first, second]))

        assert result.data[1].data == {"tapped": [4, 0]}


class TestConditionals:
    @pytest.mark.asyncio
    async def test_true_branch(self, executor, factory, recording_backend):
        conditional = factory.create_conditional(
            lambda context: True,
            factory.create_command(CommandType.TAP, {"x": 1, "y": 2}),
            factory.create_command(CommandType.LAUNCH_APP, {"bundle_id": "com.example.demo"}),
        )

        result = await executor.execute(conditional)

        assert result.success is True
        assert [call[0] for call in recording_backend.calls] == ["tap"]

    @pytest.mark.asyncio
    async def test_false_branch(self, executor, factory, recording_backend):
        async def condition(context):
            return context.session_id is not None

        conditional = factory.create_conditional(
            condition,
            factory.create_command(CommandType.TAP, {"x": 1, "y": 2}),
            factory.create_command(CommandType.LAUNCH_APP, {"bundle_id": "com.example.demo"}),
        )

        result = await executor.execute(conditional)

        assert result.data == {"launched": "com.example.demo"}
        assert [call[0] for call in recording_backend.calls] == ["launch_app"]

    @pytest.mark.asyncio
    async def test_false_without_alternative_is_noop(self, executor, factory, recording_backend):
        conditional = factory.create_conditional(
            lambda context: False, factory.create_command(CommandType.TAP, {"x": 1, "y": 2})
        )

        result = await executor.execute(conditional)

        assert result.success is True
        assert result.data is None
        assert recording_backend.calls == []

    @pytest.mark.asyncio
    async def test_raising_condition(self, executor, factory, recording_backend):
        def condition(context):
            raise RuntimeError("boom")

        conditional = factory.create_conditional(condition, factory.create_command(CommandType.TAP, {"x": 1, "y": 2}))

        result = await executor.execute(conditional)

        assert result.success is False
        assert "boom" in result.error
        assert recording_backend.calls == []
