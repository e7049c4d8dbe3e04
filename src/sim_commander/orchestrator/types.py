"""
Command model consumed by the orchestrator.

Commands are plain data plus optional hooks. Hooks may be regular
callables or coroutine functions; the executor awaits whatever they return
when it is awaitable.
"""

import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from ..core.commands.types import ErrorType


class CommandType(Enum):
    """Every operation the orchestrator can execute. Values are wire names."""

    # Simulator management
    CREATE_SIMULATOR_SESSION = "createSimulatorSession"
    TERMINATE_SIMULATOR_SESSION = "terminateSimulatorSession"
    LIST_AVAILABLE_SIMULATORS = "listAvailableSimulators"
    LIST_BOOTED_SIMULATORS = "listBootedSimulators"
    BOOT_SIMULATOR = "bootSimulator"
    SHUTDOWN_SIMULATOR = "shutdownSimulator"

    # Application management
    INSTALL_APP = "installApp"
    LAUNCH_APP = "launchApp"
    TERMINATE_APP = "terminateApp"
    UNINSTALL_APP = "uninstallApp"
    LIST_APPS = "listApps"

    # UI interaction
    TAP = "tap"
    SWIPE = "swipe"
    PRESS_DEVICE_BUTTON = "pressDeviceButton"
    INPUT_TEXT = "inputText"
    PRESS_KEY = "pressKey"
    PRESS_KEY_SEQUENCE = "pressKeySequence"

    # Accessibility
    DESCRIBE_ELEMENTS = "describeElements"
    DESCRIBE_POINT = "describePoint"

    # Capture and logs
    TAKE_SCREENSHOT = "takeScreenshot"
    CAPTURE_SCREEN = "captureScreen"
    RECORD_VIDEO = "recordVideo"
    STOP_RECORDING = "stopRecording"
    GET_SYSTEM_LOGS = "getSystemLogs"
    GET_APP_LOGS = "getAppLogs"
    GET_LOGS = "getLogs"

    # Debug
    START_DEBUG = "startDebug"
    STOP_DEBUG = "stopDebug"
    DEBUG_STATUS = "debugStatus"
    LIST_CRASH_LOGS = "listCrashLogs"
    SHOW_CRASH_LOG = "showCrashLog"
    DELETE_CRASH_LOGS = "deleteCrashLogs"

    # Misc
    INSTALL_DYLIB = "installDylib"
    OPEN_URL = "openUrl"
    CLEAR_KEYCHAIN = "clearKeychain"
    SET_LOCATION = "setLocation"
    ADD_MEDIA = "addMedia"
    APPROVE_PERMISSIONS = "approvePermissions"
    UPDATE_CONTACTS = "updateContacts"
    FOCUS_SIMULATOR = "focusSimulator"

    # Verification
    IS_SIMULATOR_BOOTED = "isSimulatorBooted"
    IS_APP_INSTALLED = "isAppInstalled"

    # Composite
    SEQUENCE = "sequence"
    CONDITIONAL = "conditional"

    @property
    def is_composite(self) -> bool:
        return self in (CommandType.SEQUENCE, CommandType.CONDITIONAL)


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class CommandResult:
    """Outcome of executing one command."""

    success: bool
    data: Any = None
    error: Optional[str] = None
    timestamp: int = field(default_factory=now_ms)
    suggestions: Optional[List[str]] = None
    type: Optional[ErrorType] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"success": self.success, "timestamp": self.timestamp}
        if isinstance(self.data, list):
            result["data"] = [
                item.to_dict() if isinstance(item, CommandResult) else item for item in self.data
            ]
        elif self.data is not None:
            result["data"] = self.data
        if self.error is not None:
            result["error"] = self.error
        if self.suggestions is not None:
            result["suggestions"] = list(self.suggestions)
        if self.type is not None:
            result["type"] = self.type.value
        return result


@dataclass
class CommandContext:
    """State shared by the commands of one execution."""

    session_id: Optional[str] = None
    previous_results: Dict[str, CommandResult] = field(default_factory=dict)
    variables: Dict[str, Any] = field(default_factory=dict)


Predicate = Callable[[CommandContext], Union[bool, Awaitable[bool]]]
ParameterTransform = Callable[[CommandContext], Union[Dict[str, Any], Awaitable[Dict[str, Any]]]]
ErrorHandler = Callable[[Exception, CommandContext], Union[CommandResult, Awaitable[CommandResult]]]


def new_command_id() -> str:
    return str(uuid.uuid4())


@dataclass
class OrchestratorCommand:
    """
    A typed command ready for execution.

    Attributes:
        type: Operation to run
        parameters: Operation arguments
        id: Unique identifier (uuid4)
        description: Human-readable description
        timeout: Per-attempt time budget in seconds
        retries: Extra attempts after the first failure
        validate: Predicate checked once before execution
        transform_parameters: Produces the parameters actually dispatched
        on_error: Builds the result once every attempt has failed
    """

    type: CommandType
    parameters: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=new_command_id)
    description: Optional[str] = None
    timeout: Optional[float] = None
    retries: Optional[int] = None
    validate: Optional[Predicate] = None
    transform_parameters: Optional[ParameterTransform] = None
    on_error: Optional[ErrorHandler] = None


@dataclass
class SequenceCommand(OrchestratorCommand):
    """Runs its children strictly in order."""

    type: CommandType = CommandType.SEQUENCE

    @property
    def commands(self) -> List[OrchestratorCommand]:
        return self.parameters.get("commands", [])

    @property
    def stop_on_error(self) -> bool:
        return bool(self.parameters.get("stop_on_error", False))


@dataclass
class ConditionalCommand(OrchestratorCommand):
    """Runs exactly one branch depending on a predicate."""

    type: CommandType = CommandType.CONDITIONAL

    @property
    def condition(self) -> Predicate:
        return self.parameters["condition"]

    @property
    def if_true(self) -> OrchestratorCommand:
        return self.parameters["if_true"]

    @property
    def if_false(self) -> Optional[OrchestratorCommand]:
        return self.parameters.get("if_false")
