"""
Accessibility inspection commands.
"""

from typing import List

from ..definitions import BaseCommandDefinition, NUMBER, define, group
from ..types import CommandDefinition

POINT = r"\(?\s*(?P<x>" + NUMBER + r")\s*,\s*(?P<y>" + NUMBER + r")\s*\)?"


class AccessibilityCommands(BaseCommandDefinition):
    category = "accessibility"
    title = "Accessibility"

    def build_definitions(self) -> List[CommandDefinition]:
        return [
            define(
                "describe elements",
                [
                    r"^(?:describe|list|show|get|dump)\s+(?:all\s+)?(?:the\s+)?(?:ui\s+|screen\s+|accessibility\s+)?"
                    r"(?:elements|ui|screen|accessibility\s+tree)$",
                    r"^(?:describir|mostrar|listar)\s+(?:todos\s+)?(?:los\s+)?elementos(?:\s+de\s+(?:la\s+)?pantalla)?$",
                ],
                "Describe every accessibility element on screen",
                examples=[
                    "describe all elements",
                    "describe the screen",
                    "show ui elements",
                    "describir elementos de la pantalla",
                ],
            ),
            define(
                "describe point",
                [
                    r"^(?:describe|inspect|what(?:'s|\s+is))\s+(?:the\s+)?(?:element\s+|point\s+)?(?:at\s+)?" + POINT + r"\??$",
                    r"^(?:describir|inspeccionar)\s+(?:el\s+)?(?:elemento|punto)\s+(?:en\s+)?" + POINT + r"$",
                ],
                "Describe the accessibility element at a point",
                required=["x", "y"],
                examples=[
                    "describe point 200, 400",
                    "what is at (100, 250)?",
                    "describir punto en 50, 60",
                ],
                extractors={"x": group("x"), "y": group("y")},
            ),
        ]
