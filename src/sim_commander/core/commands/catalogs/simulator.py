"""
Simulator lifecycle commands: sessions, listing, boot and shutdown.
"""

from typing import List

from ..definitions import BaseCommandDefinition, define, group
from ..types import CommandDefinition

UDID = r"(?P<udid>[0-9a-f][0-9a-f\-]{7,})"


def _autoboot(match):
    return "false" if match.groupdict().get("noboot") else None


class SimulatorCommands(BaseCommandDefinition):
    """Create, list, boot and inspect simulators."""

    category = "simulator"
    title = "Simulator management"

    def build_definitions(self) -> List[CommandDefinition]:
        return [
            define(
                "create session",
                [
                    r"^(?:create|start|open|new)\s+(?:a\s+)?(?:new\s+)?(?:simulator\s+)?session"
                    r"(?:\s+(?:with|on|using|for)\s+(?P<device>.+?))?"
                    r"(?:\s+(?:ios|version)\s+(?P<version>\d+(?:\.\d+)*))?"
                    r"(?P<noboot>\s+without\s+boot(?:ing)?)?$",
                    r"^(?:crear|iniciar|abrir)\s+(?:una\s+)?(?:nueva\s+)?sesi[oó]n(?:\s+de\s+simulador)?"
                    r"(?:\s+(?:con|en|usando)\s+(?P<device>.+?))?"
                    r"(?:\s+(?:ios|versi[oó]n)\s+(?P<version>\d+(?:\.\d+)*))?"
                    r"(?P<noboot>\s+sin\s+(?:arrancar|iniciar))?$",
                ],
                "Create a simulator session, optionally choosing device and iOS version",
                optional=["device_name", "platform_version", "autoboot"],
                examples=[
                    "create session",
                    "create a session with iPhone 15",
                    "start simulator session on iPhone 16 Pro without booting",
                    "create session with iPad Air iOS 17.2",
                    "crear sesión con iPhone 15",
                ],
                extractors={
                    "device_name": group("device"),
                    "platform_version": group("version"),
                    "autoboot": _autoboot,
                },
            ),
            define(
                "terminate session",
                [
                    r"^(?:terminate|end|close|stop|kill)\s+(?:the\s+)?(?:current\s+)?(?:simulator\s+)?session"
                    r"(?:\s+(?P<session>[\w\-]+))?$",
                    r"^(?:terminar|cerrar|finalizar)\s+(?:la\s+)?sesi[oó]n(?:\s+actual)?$",
                ],
                "Terminate the current (or a given) simulator session",
                optional=["session_id"],
                examples=[
                    "terminate session",
                    "end the current session",
                    "close session 4f9c2a1e",
                    "terminar sesión",
                ],
                extractors={"session_id": group("session")},
            ),
            define(
                "list booted simulators",
                [
                    r"^(?:list|show|get)\s+(?:all\s+)?(?:the\s+)?(?:booted|running|active)\s+(?:simulators?|devices?)$",
                    r"^(?:which|what)\s+simulators?\s+(?:are\s+)?(?:booted|running)\??$",
                    r"^(?:listar|mostrar)\s+(?:los\s+)?simuladores\s+(?:arrancados|activos|encendidos)$",
                ],
                "List simulators that are currently booted",
                examples=[
                    "list booted simulators",
                    "show running simulators",
                    "which simulators are running?",
                    "listar simuladores activos",
                ],
            ),
            define(
                "list simulators",
                [
                    r"^(?:list|show|get|display)\s+(?:all\s+)?(?:the\s+)?(?:available\s+)?(?:simulators?|devices?)$",
                    r"^(?:listar|mostrar|ver)\s+(?:todos\s+)?(?:los\s+)?(?:simuladores|dispositivos)(?:\s+disponibles)?$",
                ],
                "List available simulators",
                examples=[
                    "list simulators",
                    "show all available devices",
                    "listar simuladores",
                ],
            ),
            define(
                "boot simulator",
                [
                    r"^(?:boot|start|power\s+on|turn\s+on)\s+(?:the\s+)?(?:simulator|device)(?:\s+" + UDID + r")?$",
                    r"^(?:arrancar|encender|iniciar)\s+(?:el\s+)?(?:simulador|dispositivo)(?:\s+" + UDID + r")?$",
                ],
                "Boot a simulator",
                optional=["udid"],
                examples=[
                    "boot simulator",
                    "boot the simulator 7A2B9C4D-1E3F-4A5B-8C6D-9E0F1A2B3C4D",
                    "encender simulador",
                ],
                extractors={"udid": group("udid")},
            ),
            define(
                "shutdown simulator",
                [
                    r"^(?:shutdown|shut\s+down|stop|power\s+off|turn\s+off)\s+(?:the\s+)?(?:simulator|device)"
                    r"(?:\s+" + UDID + r")?$",
                    r"^(?:apagar|detener)\s+(?:el\s+)?(?:simulador|dispositivo)(?:\s+" + UDID + r")?$",
                ],
                "Shut down a simulator",
                optional=["udid"],
                examples=[
                    "shutdown simulator",
                    "shut down the device",
                    "apagar simulador",
                ],
                extractors={"udid": group("udid")},
            ),
            define(
                "focus simulator",
                [
                    r"^(?:focus|bring\s+(?:up|forward))\s+(?:the\s+)?simulator(?:\s+window)?$",
                    r"^(?:enfocar|traer)\s+(?:el\s+)?simulador(?:\s+al\s+frente)?$",
                ],
                "Bring the simulator window to the front",
                examples=[
                    "focus simulator",
                    "bring up the simulator window",
                    "enfocar simulador",
                ],
            ),
            define(
                "check simulator booted",
                [
                    r"^(?:is|check\s+if)\s+(?:the\s+)?simulator\s+(?:is\s+)?(?:booted|running|on)\??$",
                    r"^(?:check|verify)\s+(?:that\s+)?(?:the\s+)?simulator\s+(?:is\s+)?(?:booted|running)$",
                    r"^¿?(?:est[aá]\s+)?el\s+simulador\s+(?:est[aá]\s+)?(?:arrancado|encendido|activo)\??$",
                ],
                "Check whether the simulator is booted",
                examples=[
                    "is the simulator running?",
                    "check simulator booted",
                    "¿está el simulador encendido?",
                ],
            ),
        ]
