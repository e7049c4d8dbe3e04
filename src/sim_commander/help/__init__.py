"""
Help system for Sim Commander.
"""

from .help_system import HelpSystem, HelpResponse, CommandHelp, CommandCategory

__all__ = ["HelpSystem", "HelpResponse", "CommandHelp", "CommandCategory"]
