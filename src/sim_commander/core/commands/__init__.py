"""
Natural language command parsing for Sim Commander.
"""

from .types import (
    CommandDefinition,
    ParseResult,
    ErrorType,
    EnhancedError,
    CommandSummary,
    PARSE_CONFIDENCE,
)
from .definitions import BaseCommandDefinition, compile_patterns, define, group
from .registry import CommandRegistry
from .parser import NLParser
from .catalogs import DEFAULT_CATALOGS, create_default_catalogs

__all__ = [
    "CommandDefinition",
    "ParseResult",
    "ErrorType",
    "EnhancedError",
    "CommandSummary",
    "PARSE_CONFIDENCE",
    "BaseCommandDefinition",
    "compile_patterns",
    "define",
    "group",
    "CommandRegistry",
    "NLParser",
    "DEFAULT_CATALOGS",
    "create_default_catalogs",
]
