"""
Debugger and crash log commands.
"""

from typing import List

from ..definitions import BaseCommandDefinition, BUNDLE_ID, define, group
from ..types import CommandDefinition

CRASH_NOUN = r"crash(?:\s+logs?|es|\s+reports?)"
FOR_BUNDLE = r"(?:\s+(?:for|of)\s+" + BUNDLE_ID + r")?"
CRASH_NOUN_ES = r"(?:registros\s+de\s+)?(?:fallos|crashes)"

_bundle = {"bundle_id": group("bundle")}


class DebugCommands(BaseCommandDefinition):
    """Debug sessions and crash logs."""

    category = "debug"
    title = "Debugging"

    def build_definitions(self) -> List[CommandDefinition]:
        return [
            define(
                "start debug",
                [
                    r"^(?:start|begin)\s+(?:a\s+)?debug(?:ging|ger)?(?:\s+session)?(?:\s+(?:for|on))?"
                    r"(?:\s+" + BUNDLE_ID + r")?$",
                    r"^attach\s+(?:the\s+)?debugger\s+to\s+" + BUNDLE_ID + r"$",
                    r"^(?:iniciar|comenzar)\s+(?:la\s+)?depuraci[oó]n(?:\s+(?:de|para)\s+" + BUNDLE_ID + r")?$",
                ],
                "Start a debug session, optionally attached to an application",
                optional=["bundle_id"],
                examples=[
                    "start debugging com.example.demo",
                    "start debug session",
                    "attach debugger to com.example.MyApp",
                    "iniciar depuración de com.example.demo",
                ],
                extractors=_bundle,
            ),
            define(
                "stop debug",
                [
                    r"^(?:stop|end|detach)\s+(?:the\s+)?debug(?:ging|ger)?(?:\s+session)?$",
                    r"^(?:detener|parar|terminar)\s+(?:la\s+)?depuraci[oó]n$",
                ],
                "Stop the active debug session",
                examples=[
                    "stop debugging",
                    "end the debug session",
                    "detener depuración",
                ],
            ),
            define(
                "debug status",
                [
                    r"^(?:debug(?:ger)?\s+status|status\s+of\s+(?:the\s+)?debug(?:ger|ging)?(?:\s+session)?)$",
                    r"^(?:is|check\s+if)\s+(?:the\s+)?debugger\s+(?:is\s+)?(?:running|attached|active)\??$",
                    r"^estado\s+(?:de\s+(?:la\s+)?)?depuraci[oó]n$",
                ],
                "Report whether a debug session is active",
                examples=[
                    "debug status",
                    "is the debugger attached?",
                    "estado de la depuración",
                ],
            ),
            define(
                "list crash logs",
                [
                    r"^(?:list|show|get)\s+(?:all\s+)?(?:the\s+)?" + CRASH_NOUN + FOR_BUNDLE + r"$",
                    r"^(?:listar|mostrar)\s+(?:los\s+)?" + CRASH_NOUN_ES + r"$",
                ],
                "List crash logs, optionally for one application",
                optional=["bundle_id"],
                examples=[
                    "list crash logs",
                    "show crashes for com.example.demo",
                    "listar registros de fallos",
                ],
                extractors=_bundle,
            ),
            define(
                "show crash log",
                [
                    r"^(?:show|open|read|view|get)\s+(?:the\s+)?crash\s+(?:log|report)\s+(?P<name>\S+)$",
                    r"^(?:ver|mostrar|abrir)\s+(?:el\s+)?(?:registro\s+de\s+fallo|crash\s+log)\s+(?P<name>\S+)$",
                ],
                "Show the contents of one crash log",
                required=["crash_name"],
                examples=[
                    "show crash log MyApp-2024-05-01-120000.ips",
                    "ver registro de fallo Demo.ips",
                ],
                extractors={"crash_name": group("name")},
            ),
            define(
                "delete crash logs",
                [
                    r"^(?:delete|remove|clear|purge)\s+(?:all\s+)?(?:the\s+)?" + CRASH_NOUN + FOR_BUNDLE + r"$",
                    r"^(?:borrar|eliminar)\s+(?:los\s+)?" + CRASH_NOUN_ES + r"$",
                ],
                "Delete crash logs, optionally for one application",
                optional=["bundle_id"],
                examples=[
                    "delete crash logs",
                    "clear all crash reports for com.example.demo",
                    "borrar registros de fallos",
                ],
                extractors=_bundle,
            ),
        ]
