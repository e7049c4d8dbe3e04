"""
Built-in command catalogs, in registration order.
"""

from .simulator import SimulatorCommands
from .app import AppCommands
from .ui import UICommands
from .accessibility import AccessibilityCommands
from .capture import CaptureCommands
from .debug import DebugCommands
from .misc import MiscCommands

DEFAULT_CATALOGS = (
    SimulatorCommands,
    AppCommands,
    UICommands,
    AccessibilityCommands,
    CaptureCommands,
    DebugCommands,
    MiscCommands,
)


def create_default_catalogs():
    """Instantiate every built-in catalog in registration order."""
    return [catalog_class() for catalog_class in DEFAULT_CATALOGS]


__all__ = [
    "SimulatorCommands",
    "AppCommands",
    "UICommands",
    "AccessibilityCommands",
    "CaptureCommands",
    "DebugCommands",
    "MiscCommands",
    "DEFAULT_CATALOGS",
    "create_default_catalogs",
]
