"""
Adapter turning parse results into orchestrator commands.

Command names are mapped through a bilingual phrase table; numeric and
boolean parameters captured as text are coerced for the command type.
"""

from typing import Any, Dict, Optional, Tuple

from ..core.commands.types import ParseResult
from ..orchestrator.factory import CommandFactory
from ..orchestrator.types import CommandType, OrchestratorCommand
from ..utils.error_handling import CommandMappingError
from ..utils.logging import get_logger

# Insertion order matters: the first key contained in a command name wins
# when there is no exact match.
COMMAND_MAPPINGS: Dict[str, CommandType] = {
    # Simulator management (Spanish)
    "crear sesión": CommandType.CREATE_SIMULATOR_SESSION,
    "crear simulador": CommandType.CREATE_SIMULATOR_SESSION,
    "iniciar simulador": CommandType.CREATE_SIMULATOR_SESSION,
    "terminar sesión": CommandType.TERMINATE_SIMULATOR_SESSION,
    "cerrar simulador": CommandType.TERMINATE_SIMULATOR_SESSION,
    "listar simuladores": CommandType.LIST_AVAILABLE_SIMULATORS,
    "mostrar simuladores": CommandType.LIST_AVAILABLE_SIMULATORS,
    "listar simuladores arrancados": CommandType.LIST_BOOTED_SIMULATORS,
    "arrancar simulador": CommandType.BOOT_SIMULATOR,
    "apagar simulador": CommandType.SHUTDOWN_SIMULATOR,

    # Simulator management (English)
    "create session": CommandType.CREATE_SIMULATOR_SESSION,
    "start simulator": CommandType.CREATE_SIMULATOR_SESSION,
    "launch simulator": CommandType.CREATE_SIMULATOR_SESSION,
    "end session": CommandType.TERMINATE_SIMULATOR_SESSION,
    "terminate session": CommandType.TERMINATE_SIMULATOR_SESSION,
    "close simulator": CommandType.TERMINATE_SIMULATOR_SESSION,
    "list simulators": CommandType.LIST_AVAILABLE_SIMULATORS,
    "show simulators": CommandType.LIST_AVAILABLE_SIMULATORS,
    "list booted simulators": CommandType.LIST_BOOTED_SIMULATORS,
    "show running simulators": CommandType.LIST_BOOTED_SIMULATORS,
    "boot simulator": CommandType.BOOT_SIMULATOR,
    "shutdown simulator": CommandType.SHUTDOWN_SIMULATOR,

    # Application management (Spanish)
    "instalar app": CommandType.INSTALL_APP,
    "instalar aplicación": CommandType.INSTALL_APP,
    "lanzar app": CommandType.LAUNCH_APP,
    "abrir app": CommandType.LAUNCH_APP,
    "iniciar app": CommandType.LAUNCH_APP,
    "cerrar app": CommandType.TERMINATE_APP,
    "terminar app": CommandType.TERMINATE_APP,
    "desinstalar app": CommandType.UNINSTALL_APP,
    "eliminar app": CommandType.UNINSTALL_APP,
    "borrar app": CommandType.UNINSTALL_APP,
    "listar apps": CommandType.LIST_APPS,
    "mostrar apps": CommandType.LIST_APPS,

    # Application management (English)
    "install app": CommandType.INSTALL_APP,
    "launch app": CommandType.LAUNCH_APP,
    "terminate app": CommandType.TERMINATE_APP,
    "uninstall app": CommandType.UNINSTALL_APP,
    "remove app": CommandType.UNINSTALL_APP,
    "delete app": CommandType.UNINSTALL_APP,
    "list apps": CommandType.LIST_APPS,
    "show apps": CommandType.LIST_APPS,

    # UI interaction (Spanish)
    "tocar": CommandType.TAP,
    "pulsar": CommandType.TAP,
    "deslizar": CommandType.SWIPE,

    # UI interaction (English)
    "tap": CommandType.TAP,
    "swipe": CommandType.SWIPE,
    "press device button": CommandType.PRESS_DEVICE_BUTTON,
    "press button": CommandType.PRESS_DEVICE_BUTTON,
    "input text": CommandType.INPUT_TEXT,
    "press key": CommandType.PRESS_KEY,
    "press key sequence": CommandType.PRESS_KEY_SEQUENCE,

    # Accessibility (Spanish)
    "describir elementos": CommandType.DESCRIBE_ELEMENTS,
    "describir todos los elementos": CommandType.DESCRIBE_ELEMENTS,
    "describir punto": CommandType.DESCRIBE_POINT,

    # Accessibility (English)
    "describe elements": CommandType.DESCRIBE_ELEMENTS,
    "describe all elements": CommandType.DESCRIBE_ELEMENTS,
    "describe point": CommandType.DESCRIBE_POINT,

    # Screenshots and logs (Spanish)
    "capturar pantalla": CommandType.CAPTURE_SCREEN,
    "captura": CommandType.CAPTURE_SCREEN,
    "logs del sistema": CommandType.GET_SYSTEM_LOGS,
    "logs de app": CommandType.GET_APP_LOGS,
    "grabar video": CommandType.RECORD_VIDEO,
    "detener grabación": CommandType.STOP_RECORDING,

    # Screenshots and logs (English)
    "take screenshot": CommandType.CAPTURE_SCREEN,
    "capture screen": CommandType.CAPTURE_SCREEN,
    "screenshot": CommandType.CAPTURE_SCREEN,
    "logs": CommandType.GET_LOGS,
    "get logs": CommandType.GET_LOGS,
    "record video": CommandType.RECORD_VIDEO,
    "stop recording": CommandType.STOP_RECORDING,

    # Debug (Spanish)
    "iniciar debug": CommandType.START_DEBUG,
    "parar debug": CommandType.STOP_DEBUG,
    "estado debug": CommandType.DEBUG_STATUS,
    "listar crash logs": CommandType.LIST_CRASH_LOGS,
    "mostrar crash log": CommandType.SHOW_CRASH_LOG,
    "eliminar crash logs": CommandType.DELETE_CRASH_LOGS,

    # Debug (English)
    "start debug": CommandType.START_DEBUG,
    "stop debug": CommandType.STOP_DEBUG,
    "debug status": CommandType.DEBUG_STATUS,
    "list crash logs": CommandType.LIST_CRASH_LOGS,
    "show crash log": CommandType.SHOW_CRASH_LOG,
    "delete crash logs": CommandType.DELETE_CRASH_LOGS,

    # Misc (Spanish)
    "instalar dylib": CommandType.INSTALL_DYLIB,
    "abrir url": CommandType.OPEN_URL,
    "limpiar keychain": CommandType.CLEAR_KEYCHAIN,
    "establecer ubicación": CommandType.SET_LOCATION,
    "añadir media": CommandType.ADD_MEDIA,
    "aprobar permisos": CommandType.APPROVE_PERMISSIONS,
    "actualizar contactos": CommandType.UPDATE_CONTACTS,
    "enfocar simulador": CommandType.FOCUS_SIMULATOR,

    # Misc (English)
    "install dylib": CommandType.INSTALL_DYLIB,
    "open url": CommandType.OPEN_URL,
    "clear keychain": CommandType.CLEAR_KEYCHAIN,
    "set location": CommandType.SET_LOCATION,
    "add media": CommandType.ADD_MEDIA,
    "approve permissions": CommandType.APPROVE_PERMISSIONS,
    "update contacts": CommandType.UPDATE_CONTACTS,
    "focus simulator": CommandType.FOCUS_SIMULATOR,

    # Verification
    "verificar simulador": CommandType.IS_SIMULATOR_BOOTED,
    "comprobar simulador": CommandType.IS_SIMULATOR_BOOTED,
    "check simulator booted": CommandType.IS_SIMULATOR_BOOTED,
    "is simulator booted": CommandType.IS_SIMULATOR_BOOTED,
    "verificar app": CommandType.IS_APP_INSTALLED,
    "comprobar app": CommandType.IS_APP_INSTALLED,
    "check app installed": CommandType.IS_APP_INSTALLED,
    "is app installed": CommandType.IS_APP_INSTALLED,
}

NUMERIC_PARAMETERS: Dict[CommandType, Tuple[str, ...]] = {
    CommandType.TAP: ("x", "y"),
    CommandType.SWIPE: ("start_x", "start_y", "end_x", "end_y", "duration"),
    CommandType.DESCRIBE_POINT: ("x", "y"),
    CommandType.SET_LOCATION: ("latitude", "longitude"),
}


def to_number(value: Any) -> Any:
    """Coerce numeric text to int (when integral) or float.

    Values that are not numeric text are returned unchanged.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return value
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(value.strip())
        except ValueError:
            return value
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


class ParserToOrchestrator:
    """Converts ParseResult objects into OrchestratorCommand objects."""

    def __init__(self, command_factory: Optional[CommandFactory] = None,
                 mappings: Optional[Dict[str, CommandType]] = None):
        self.command_factory = command_factory or CommandFactory()
        self.command_mappings = dict(mappings) if mappings is not None else dict(COMMAND_MAPPINGS)
        self.logger = get_logger(__name__)

    def convert_to_command(self, parse_result: ParseResult) -> OrchestratorCommand:
        """
        Convert a parse result into an executable command.

        Raises:
            CommandMappingError: If the command name has no CommandType
        """
        command_type = self.map_to_command_type(parse_result.command)
        parameters = self.convert_parameters(command_type, parse_result.parameters)

        command = self.command_factory.create_command(
            command_type,
            parameters,
            f'Command generated from: "{parse_result.original_text}"'
        )
        self.logger.debug(f"Mapped '{parse_result.command}' to {command_type.value} ({command.id})")
        return command

    def map_to_command_type(self, command_name: str) -> CommandType:
        lowered = command_name.lower()

        if lowered in self.command_mappings:
            return self.command_mappings[lowered]

        for key, command_type in self.command_mappings.items():
            if key in lowered:
                return command_type

        raise CommandMappingError(command_name)

    def convert_parameters(self, command_type: CommandType,
                           parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of the parameters with type-specific coercions applied."""
        converted = dict(parameters)

        for name in NUMERIC_PARAMETERS.get(command_type, ()):
            if name in converted:
                converted[name] = to_number(converted[name])

        if command_type is CommandType.CREATE_SIMULATOR_SESSION:
            autoboot = converted.get("autoboot")
            if isinstance(autoboot, str):
                converted["autoboot"] = autoboot.lower() == "true"

        return converted
