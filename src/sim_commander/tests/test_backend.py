"""
Test suite for the backend interface and the dry-run backend.
"""

import pytest

from sim_commander.orchestrator.backend import DryRunBackend, SimulatorBackend, operation_name
from sim_commander.orchestrator.types import CommandType
from sim_commander.utils.error_handling import BackendOperationNotSupported, CommandExecutionError

from sim_commander.tests.conftest import RecordingBackend


class TestOperationRouting:
    def test_operation_name(self):
        assert operation_name(CommandType.LAUNCH_APP) == "launch_app"
        assert operation_name(CommandType.IS_SIMULATOR_BOOTED) == "is_simulator_booted"

    def test_supports(self, recording_backend):
        assert recording_backend.supports(CommandType.TAP)
        assert not recording_backend.supports(CommandType.SWIPE)

    def test_supported_operations(self, recording_backend):
        assert recording_backend.supported_operations() == [
            CommandType.LAUNCH_APP, CommandType.LIST_APPS, CommandType.TAP,
        ]

    def test_base_backend_supports_nothing(self):
        assert SimulatorBackend().supported_operations() == []

    def test_composites_never_dispatched(self):
        assert not DryRunBackend().supports(CommandType.SEQUENCE)


class TestDispatch:
    @pytest.mark.asyncio
    async def test_dispatch_routes_by_name(self):
        backend = RecordingBackend()

        result = await backend.dispatch(CommandType.LAUNCH_APP, {"bundle_id": "com.example.demo"})

        assert result == {"launched": "com.example.demo"}

    @pytest.mark.asyncio
    async def test_unsupported_operation(self):
        with pytest.raises(BackendOperationNotSupported):
            await SimulatorBackend().dispatch(CommandType.TAP, {"x": 1, "y": 2})

    @pytest.mark.asyncio
    async def test_operation_errors_are_wrapped(self):
        with pytest.raises(CommandExecutionError) as exc_info:
            await RecordingBackend().dispatch(CommandType.LIST_APPS, {})

        assert exc_info.value.details["error_type"] == "parameters"

    @pytest.mark.asyncio
    async def test_dry_run_echoes(self):
        backend = DryRunBackend()

        result = await backend.dispatch(CommandType.OPEN_URL, {"url": "https://example.com"})

        assert result == {"command": "openUrl", "parameters": {"url": "https://example.com"}}
        assert backend.calls == [(CommandType.OPEN_URL, {"url": "https://example.com"})]

    def test_dry_run_supports_every_atomic_type(self):
        supported = DryRunBackend().supported_operations()

        assert len(supported) == len(CommandType) - 2
