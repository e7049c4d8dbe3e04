"""
Miscellaneous device commands: dylibs, URLs, keychain, location, media,
permissions and contacts.
"""

from typing import List

from ..definitions import BaseCommandDefinition, BUNDLE_ID, NUMBER, define, group, split_list
from ..types import CommandDefinition

URL = r"(?P<url>[a-z][a-z0-9+.\-]*://\S+)"
COORDINATES = r"\(?\s*(?P<lat>" + NUMBER + r")\s*,\s*(?P<lon>" + NUMBER + r")\s*\)?"


def _permissions(value: str) -> List[str]:
    return [permission.lower() for permission in split_list(value)]


class MiscCommands(BaseCommandDefinition):
    """Commands that do not fit the other catalogs."""

    category = "misc"
    title = "Miscellaneous"

    def build_definitions(self) -> List[CommandDefinition]:
        return [
            define(
                "install dylib",
                [
                    r"^(?:install|inject|load)\s+(?:the\s+)?(?:dylib|library|dynamic\s+library)\s+(?P<path>\S+)$",
                    r"^(?:install|inject|load)\s+(?P<path>\S+\.dylib)$",
                    r"^(?:instalar|inyectar|cargar)\s+(?:la\s+)?(?:dylib|librer[ií]a|biblioteca)\s+(?P<path>\S+)$",
                ],
                "Install a dynamic library into the simulator",
                required=["dylib_path"],
                examples=[
                    "install dylib /tmp/libInjected.dylib",
                    "inject /opt/hooks/libTweak.dylib",
                    "cargar librería /tmp/libX.dylib",
                ],
                extractors={"dylib_path": group("path")},
            ),
            define(
                "open url",
                [
                    r"^(?:open|visit|go\s+to|navigate\s+to|browse\s+to)\s+(?:the\s+)?(?:url\s+|link\s+)?" + URL + r"$",
                    r"^(?:abrir|visitar|ir\s+a)\s+(?:la\s+)?(?:url\s+|direcci[oó]n\s+|enlace\s+)?" + URL + r"$",
                ],
                "Open a URL or deep link",
                required=["url"],
                examples=[
                    "open url https://www.apple.com",
                    "open myapp://settings/profile",
                    "abrir enlace https://example.com",
                ],
                extractors={"url": group("url")},
            ),
            define(
                "clear keychain",
                [
                    r"^(?:clear|reset|wipe|erase)\s+(?:the\s+)?keychain$",
                    r"^(?:limpiar|borrar|restablecer)\s+(?:el\s+)?(?:llavero|keychain)$",
                ],
                "Clear the simulator keychain",
                examples=[
                    "clear keychain",
                    "reset the keychain",
                    "limpiar llavero",
                ],
            ),
            define(
                "set location",
                [
                    r"^(?:set|change|simulate|update)\s+(?:the\s+)?(?:gps\s+)?location\s+(?:to\s+)?" + COORDINATES + r"$",
                    r"^(?:establecer|cambiar|simular)\s+(?:la\s+)?ubicaci[oó]n\s+(?:a\s+|en\s+)?" + COORDINATES + r"$",
                ],
                "Set the simulated GPS location",
                required=["latitude", "longitude"],
                examples=[
                    "set location to 37.7749, -122.4194",
                    "simulate gps location 51.5074, -0.1278",
                    "establecer ubicación a 40.4168, -3.7038",
                ],
                extractors={"latitude": group("lat"), "longitude": group("lon")},
            ),
            define(
                "add media",
                [
                    r"^(?:add|upload|import)\s+(?:the\s+)?(?:media|photos?|videos?|images?)\s+(?P<paths>.+?)"
                    r"(?:\s+to\s+(?:the\s+)?(?:camera\s+roll|photos|library|gallery))?$",
                    r"^(?:a[nñ]adir|agregar|importar)\s+(?:las\s+)?(?:fotos?|v[ií]deos?|im[aá]genes|medios|multimedia)\s+"
                    r"(?P<paths>.+?)(?:\s+a\s+(?:la\s+)?(?:galer[ií]a|fototeca|biblioteca))?$",
                ],
                "Add photos or videos to the simulator library",
                required=["media_paths"],
                examples=[
                    "add media /tmp/a.jpg, /tmp/b.mp4",
                    "add photos /tmp/cat.png to the camera roll",
                    "añadir fotos /tmp/gato.png a la galería",
                ],
                extractors={"media_paths": group("paths", split_list)},
            ),
            define(
                "approve permissions",
                [
                    r"^(?:approve|grant|allow)\s+(?P<perms>[a-z][\w\s,\-]*?)\s+permissions?\s+(?:to|for)\s+" + BUNDLE_ID + r"$",
                    r"^(?:approve|grant|allow)\s+permissions?\s+(?P<perms>[a-z][\w\s,\-]*?)\s+(?:to|for)\s+" + BUNDLE_ID + r"$",
                    r"^(?:aprobar|conceder|otorgar|permitir)\s+(?:los\s+)?permisos?\s+(?:de\s+)?(?P<perms>[\w\s,\-]+?)"
                    r"\s+(?:a|para)\s+" + BUNDLE_ID + r"$",
                ],
                "Grant privacy permissions to an application",
                required=["bundle_id", "permissions"],
                examples=[
                    "grant photos, camera permissions to com.example.demo",
                    "approve permissions camera and microphone for com.example.MyApp",
                    "conceder permisos de cámara y micrófono a com.example.demo",
                ],
                extractors={
                    "bundle_id": group("bundle"),
                    "permissions": group("perms", _permissions),
                },
            ),
            define(
                "update contacts",
                [
                    r"^(?:update|import|load|add)\s+(?:the\s+)?contacts\s+(?:from\s+)?(?P<path>\S+)$",
                    r"^(?:actualizar|importar|cargar)\s+(?:los\s+)?contactos\s+(?:desde\s+)?(?P<path>\S+)$",
                ],
                "Replace the simulator contacts database",
                required=["contacts_path"],
                examples=[
                    "update contacts from /tmp/contacts.sqlitedb",
                    "import contacts /tmp/people.db",
                    "importar contactos desde /tmp/contactos.db",
                ],
                extractors={"contacts_path": group("path")},
            ),
        ]
