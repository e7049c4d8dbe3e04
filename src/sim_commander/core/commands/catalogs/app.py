"""
Application management commands.
"""

from typing import List

from ..definitions import BaseCommandDefinition, BUNDLE_ID, define, group
from ..types import CommandDefinition

APP_PATH = r"(?P<path>\S+\.(?:app|ipa))"
APP_NOUN = r"(?:app(?:lication)?\s+)?"
APP_NOUN_ES = r"(?:(?:app|aplicaci[oó]n)\s+)?"
# A dotted identifier on its own, e.g. "com.apple.Maps"
BARE_BUNDLE_ID = r"^(?P<bundle>[a-z0-9][\w\-]*(?:\.[\w\-]+){2,})$"

_bundle = {"bundle_id": group("bundle")}


class AppCommands(BaseCommandDefinition):
    """Install, launch, terminate and inspect applications."""

    category = "app"
    title = "Application management"

    def build_definitions(self) -> List[CommandDefinition]:
        return [
            define(
                "install app",
                [
                    r"^(?:install|deploy)\s+(?:the\s+)?" + APP_NOUN + r"(?:from\s+|at\s+)?" + APP_PATH + r"$",
                    r"^instalar\s+(?:la\s+)?" + APP_NOUN_ES + r"(?:desde\s+)?" + APP_PATH + r"$",
                ],
                "Install an .app bundle or .ipa archive on the simulator",
                required=["app_path"],
                examples=[
                    "install app /tmp/build/MyApp.app",
                    "install ~/Downloads/Demo.ipa",
                    "instalar aplicación /tmp/MyApp.app",
                ],
                extractors={"app_path": group("path")},
            ),
            define(
                "launch app",
                [
                    r"^(?:launch|open|start|run)\s+(?:the\s+)?" + APP_NOUN + BUNDLE_ID + r"$",
                    r"^(?:abrir|lanzar|ejecutar|iniciar)\s+(?:la\s+)?" + APP_NOUN_ES + BUNDLE_ID + r"$",
                    BARE_BUNDLE_ID,
                ],
                "Launch an installed application by bundle identifier",
                required=["bundle_id"],
                examples=[
                    "launch app com.apple.mobilesafari",
                    "open com.example.MyApp",
                    "abrir aplicación com.apple.Preferences",
                    "com.apple.Maps",
                ],
                extractors=_bundle,
            ),
            define(
                "terminate app",
                [
                    r"^(?:terminate|kill|close|quit|stop|force\s+quit)\s+(?:the\s+)?" + APP_NOUN + BUNDLE_ID + r"$",
                    r"^(?:cerrar|terminar|detener)\s+(?:la\s+)?" + APP_NOUN_ES + BUNDLE_ID + r"$",
                ],
                "Terminate a running application",
                required=["bundle_id"],
                examples=[
                    "terminate app com.example.MyApp",
                    "kill com.apple.mobilesafari",
                    "cerrar aplicación com.example.demo",
                ],
                extractors=_bundle,
            ),
            define(
                "uninstall app",
                [
                    r"^(?:uninstall|remove|delete)\s+(?:the\s+)?" + APP_NOUN + BUNDLE_ID + r"$",
                    r"^(?:desinstalar|eliminar|borrar)\s+(?:la\s+)?" + APP_NOUN_ES + BUNDLE_ID + r"$",
                ],
                "Uninstall an application",
                required=["bundle_id"],
                examples=[
                    "uninstall app com.example.MyApp",
                    "remove com.example.demo",
                    "desinstalar com.example.demo",
                ],
                extractors=_bundle,
            ),
            define(
                "list apps",
                [
                    r"^(?:list|show|get)\s+(?:all\s+)?(?:the\s+)?(?:installed\s+)?(?:apps|applications)(?:\s+installed)?$",
                    r"^(?:listar|mostrar|ver)\s+(?:las\s+)?(?:aplicaciones|apps)(?:\s+instaladas)?$",
                ],
                "List installed applications",
                examples=[
                    "list apps",
                    "show installed applications",
                    "listar aplicaciones",
                ],
            ),
            define(
                "check app installed",
                [
                    r"^(?:is|check\s+if)\s+(?:the\s+)?" + APP_NOUN + BUNDLE_ID + r"\s+installed\??$",
                    r"^(?:check|verify)\s+(?:that\s+)?" + APP_NOUN + BUNDLE_ID + r"\s+is\s+installed$",
                    r"^¿?est[aá]\s+instalad[ao]\s+(?:la\s+)?" + APP_NOUN_ES + BUNDLE_ID + r"\??$",
                ],
                "Check whether an application is installed",
                required=["bundle_id"],
                examples=[
                    "is com.example.demo installed?",
                    "check that com.example.MyApp is installed",
                    "¿está instalada com.example.demo?",
                ],
                extractors=_bundle,
            ),
        ]
