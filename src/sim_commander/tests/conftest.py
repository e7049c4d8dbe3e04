"""
Shared pytest configuration for Sim Commander tests.

This file provides shared fixtures and configuration for all test modules.
"""

import asyncio

import pytest

from sim_commander.config.models import ExecutionConfig, SuggestionConfig
from sim_commander.core.commands.catalogs import create_default_catalogs
from sim_commander.core.commands.parser import NLParser
from sim_commander.orchestrator.backend import SimulatorBackend, DryRunBackend
from sim_commander.orchestrator.executor import CommandExecutor
from sim_commander.orchestrator.factory import CommandFactory


class RecordingBackend(SimulatorBackend):
    """Backend double that records calls and fails on demand.

    ``tap`` fails ``tap_failures`` times before succeeding, ``launch_app``
    sleeps ``launch_delay`` seconds and ``list_apps`` always fails.
    """

    def __init__(self, tap_failures: int = 0, launch_delay: float = 0.0):
        super().__init__()
        self.tap_failures = tap_failures
        self.launch_delay = launch_delay
        self.calls = []

    async def tap(self, parameters):
        self.calls.append(("tap", dict(parameters)))
        if self.tap_failures > 0:
            self.tap_failures -= 1
            raise RuntimeError("touch event rejected")
        return {"tapped": [parameters.get("x"), parameters.get("y")]}

    async def launch_app(self, parameters):
        self.calls.append(("launch_app", dict(parameters)))
        if self.launch_delay:
            await asyncio.sleep(self.launch_delay)
        return {"launched": parameters.get("bundle_id")}

    async def list_apps(self, parameters):
        self.calls.append(("list_apps", dict(parameters)))
        raise ValueError("simulator not booted")


@pytest.fixture
def parser():
    """NLParser loaded with the built-in catalogs."""
    return NLParser(SuggestionConfig())


@pytest.fixture(scope="session")
def catalogs():
    return create_default_catalogs()


@pytest.fixture
def factory():
    return CommandFactory()


@pytest.fixture
def execution_config():
    """Execution settings without retry delays so tests stay fast."""
    return ExecutionConfig(default_timeout_seconds=1.0, default_retries=0, retry_delay_seconds=0.0)


@pytest.fixture
def recording_backend():
    return RecordingBackend()


@pytest.fixture
def dry_run_backend():
    return DryRunBackend()


@pytest.fixture
def executor(recording_backend, execution_config):
    return CommandExecutor(recording_backend, execution_config)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "cli: marks tests that drive the command-line interface"
    )
