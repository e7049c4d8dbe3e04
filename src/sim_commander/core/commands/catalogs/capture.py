"""
Screen capture, video recording and log retrieval commands.
"""

from typing import List

from ..definitions import BaseCommandDefinition, BUNDLE_ID, define, group, lookup
from ..types import CommandDefinition

LOG_KINDS = {"system": "system", "sistema": "system", "app": "app"}


class CaptureCommands(BaseCommandDefinition):
    """Screenshots, screen recordings and logs."""

    category = "capture"
    title = "Capture and logs"

    def build_definitions(self) -> List[CommandDefinition]:
        return [
            define(
                "take screenshot",
                [
                    r"^(?:take|capture|grab|save)\s+(?:a\s+)?(?:screenshot|screen\s*shot|screen\s+capture)"
                    r"(?:\s+(?:to|as|at)\s+(?P<path>\S+))?$",
                    r"^screenshot(?:\s+(?P<path>\S+))?$",
                    r"^(?:tomar|capturar|hacer)\s+(?:una\s+)?(?:captura(?:\s+de\s+pantalla)?|pantallazo)"
                    r"(?:\s+(?:en|como)\s+(?P<path>\S+))?$",
                ],
                "Take a screenshot, optionally saving it to a path",
                optional=["output_path"],
                examples=[
                    "take screenshot",
                    "take a screenshot to /tmp/home.png",
                    "screenshot",
                    "tomar captura de pantalla",
                ],
                extractors={"output_path": group("path")},
            ),
            define(
                "record video",
                [
                    r"^(?:record(?:\s+(?:a\s+)?(?:video|screen))?|start\s+(?:video\s+|screen\s+)?recording)"
                    r"(?:\s+(?:to|as|at)\s+(?P<path>\S+))?$",
                    r"^(?:grabar|iniciar\s+grabaci[oó]n)(?:\s+(?:de\s+)?(?:video|v[ií]deo|pantalla))?"
                    r"(?:\s+en\s+(?P<path>\S+))?$",
                ],
                "Start recording the simulator screen",
                optional=["output_path"],
                examples=[
                    "record video",
                    "start recording",
                    "record a video to /tmp/demo.mp4",
                    "grabar video",
                ],
                extractors={"output_path": group("path")},
            ),
            define(
                "stop recording",
                [
                    r"^(?:stop|end|finish)\s+(?:the\s+)?(?:video\s+|screen\s+)?recording$",
                    r"^(?:detener|parar|terminar)\s+(?:la\s+)?grabaci[oó]n$",
                ],
                "Stop the active screen recording",
                examples=[
                    "stop recording",
                    "stop the video recording",
                    "detener grabación",
                ],
            ),
            define(
                "get logs",
                [
                    r"^(?:get|show|fetch|read|display)\s+(?:the\s+)?(?:(?P<kind>system|app)\s+)?logs?"
                    r"(?:\s+(?:for|of|from)\s+" + BUNDLE_ID + r")?$",
                    r"^logs$",
                    r"^(?:ver|mostrar|obtener)\s+(?:los\s+)?(?:registros|logs)(?:\s+del\s+(?P<kind>sistema))?"
                    r"(?:\s+de\s+(?:la\s+)?(?:app\s+)?" + BUNDLE_ID + r")?$",
                ],
                "Fetch system or application logs",
                optional=["log_type", "bundle_id"],
                examples=[
                    "get logs",
                    "get system logs",
                    "show app logs for com.example.demo",
                    "logs",
                    "ver registros del sistema",
                ],
                extractors={
                    "log_type": lookup("kind", LOG_KINDS),
                    "bundle_id": group("bundle"),
                },
            ),
        ]
