"""
UI interaction commands: taps, swipes, hardware buttons and keyboard input.
"""

import re
from typing import List

from ..definitions import BaseCommandDefinition, NUMBER, define, group, lookup, strip_quotes
from ..types import CommandDefinition

POINT = r"\(?\s*(?P<x>" + NUMBER + r")\s*,\s*(?P<y>" + NUMBER + r")\s*\)?"
START_POINT = r"\(?\s*(?P<sx>" + NUMBER + r")\s*,\s*(?P<sy>" + NUMBER + r")\s*\)?"
END_POINT = r"\(?\s*(?P<ex>" + NUMBER + r")\s*,\s*(?P<ey>" + NUMBER + r")\s*\)?"

DIRECTIONS = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "arriba": "up",
    "abajo": "down",
    "izquierda": "left",
    "derecha": "right",
}

BUTTONS = {
    "home": "HOME",
    "lock": "LOCK",
    "power": "LOCK",
    "side": "SIDE_BUTTON",
    "siri": "SIRI",
    "apple pay": "APPLE_PAY",
    "volume up": "VOLUME_UP",
    "volume down": "VOLUME_DOWN",
    "inicio": "HOME",
    "bloqueo": "LOCK",
    "encendido": "LOCK",
    "subir volumen": "VOLUME_UP",
    "bajar volumen": "VOLUME_DOWN",
}

# HID usage codes
KEY_CODES = {
    "enter": 40,
    "return": 40,
    "intro": 40,
    "escape": 41,
    "esc": 41,
    "delete": 42,
    "backspace": 42,
    "borrar": 42,
    "tab": 43,
    "tabulador": 43,
    "space": 44,
    "espacio": 44,
}


def _key_code(match):
    groups = match.groupdict()
    if groups.get("code"):
        return int(groups["code"])
    if groups.get("name"):
        return KEY_CODES.get(groups["name"].lower())
    return None


def _key_codes(value: str) -> List[int]:
    return [int(code) for code in re.findall(r"\d+", value)]


class UICommands(BaseCommandDefinition):
    """Touch, gesture, button and keyboard interaction."""

    category = "ui"
    title = "UI interaction"

    def build_definitions(self) -> List[CommandDefinition]:
        return [
            define(
                "tap",
                [
                    r"^(?:tap|click|touch|press)\s+(?:at\s+|on\s+)?" + POINT + r"$",
                    r"^(?:tap|click|touch)\s+(?:at\s+)?x\s*[=:]\s*(?P<x>" + NUMBER + r")\s*,?\s*"
                    r"y\s*[=:]\s*(?P<y>" + NUMBER + r")$",
                    r"^(?:tocar|toca|pulsar)\s+(?:en\s+)?" + POINT + r"$",
                ],
                "Tap the screen at the given coordinates",
                required=["x", "y"],
                examples=[
                    "tap at 100, 200",
                    "click (150, 300)",
                    "tap at x=50 y=75",
                    "tocar en 100, 200",
                ],
                extractors={"x": group("x"), "y": group("y")},
            ),
            define(
                "swipe",
                [
                    r"^(?:swipe|drag|scroll)\s+from\s+" + START_POINT + r"\s+to\s+" + END_POINT +
                    r"(?:\s+(?:in|over|for)\s+(?P<duration>" + NUMBER + r")\s*(?:s|secs?|seconds?))?$",
                    r"^(?:swipe|scroll)\s+(?P<direction>up|down|left|right)$",
                    r"^deslizar\s+desde\s+" + START_POINT + r"\s+hasta\s+" + END_POINT +
                    r"(?:\s+en\s+(?P<duration>" + NUMBER + r")\s*(?:s|segundos?))?$",
                    r"^deslizar\s+(?:hacia\s+)?(?:la\s+)?(?P<direction>arriba|abajo|izquierda|derecha)$",
                ],
                "Swipe between two points or in a direction",
                optional=["start_x", "start_y", "end_x", "end_y", "duration", "direction"],
                examples=[
                    "swipe from (50, 400) to (300, 400) in 0.5 seconds",
                    "swipe from 100, 500 to 100, 100",
                    "swipe up",
                    "deslizar hacia la izquierda",
                ],
                extractors={
                    "start_x": group("sx"),
                    "start_y": group("sy"),
                    "end_x": group("ex"),
                    "end_y": group("ey"),
                    "duration": group("duration"),
                    "direction": lookup("direction", DIRECTIONS),
                },
            ),
            define(
                "press button",
                [
                    r"^(?:press|push|click|hit)\s+(?:the\s+)?"
                    r"(?P<button>home|lock|power|side|siri|apple\s+pay|volume\s+up|volume\s+down)(?:\s+button)?$",
                    r"^(?:pulsar|presionar|apretar)\s+(?:el\s+)?bot[oó]n\s+(?:de\s+)?"
                    r"(?P<button>inicio|bloqueo|encendido|siri|subir\s+volumen|bajar\s+volumen)$",
                ],
                "Press a hardware button",
                required=["button"],
                examples=[
                    "press home button",
                    "press the volume up button",
                    "pulsar botón de inicio",
                ],
                extractors={"button": lookup("button", BUTTONS)},
            ),
            define(
                "input text",
                [
                    r"^(?:type|input|enter|write)\s+(?:the\s+)?(?:text\s+)?(?P<text>.+)$",
                    r"^(?:escribir|teclear|introducir)\s+(?:el\s+)?(?:texto\s+)?(?P<text>.+)$",
                ],
                "Type text into the focused field",
                required=["text"],
                examples=[
                    'type text "Hello World"',
                    "input test@example.com",
                    'escribir "Hola Mundo"',
                ],
                extractors={"text": group("text", strip_quotes)},
            ),
            define(
                "press key sequence",
                [
                    r"^(?:press|send)\s+(?:the\s+)?key\s+sequence\s+(?P<codes>\d+(?:\s*,?\s*\d+)*)$",
                    r"^(?:pulsar|enviar)\s+(?:la\s+)?secuencia\s+de\s+teclas\s+(?P<codes>\d+(?:\s*,?\s*\d+)*)$",
                ],
                "Press a sequence of key codes",
                required=["key_codes"],
                examples=[
                    "press key sequence 4, 5, 6",
                    "send key sequence 40 41",
                    "pulsar secuencia de teclas 4, 5",
                ],
                extractors={"key_codes": group("codes", _key_codes)},
            ),
            define(
                "press key",
                [
                    r"^(?:press|hit|send)\s+(?:the\s+)?key\s+(?P<code>\d+)$",
                    r"^(?:press|hit)\s+(?:the\s+)?(?P<name>enter|return|escape|esc|delete|backspace|tab|space)(?:\s+key)?$",
                    r"^(?:pulsar|presionar)\s+(?:la\s+)?tecla\s+(?P<code>\d+)$",
                    r"^(?:pulsar|presionar)\s+(?:la\s+)?tecla\s+(?P<name>intro|escape|borrar|tabulador|espacio)$",
                ],
                "Press a single key by code or name",
                required=["key_code"],
                examples=[
                    "press key 40",
                    "press enter",
                    "hit the escape key",
                    "pulsar tecla intro",
                ],
                extractors={"key_code": _key_code},
            ),
        ]
