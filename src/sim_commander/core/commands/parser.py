"""
Natural language parser pre-loaded with the built-in catalogs.
"""

from typing import Any, Dict, List, Optional

from .catalogs import create_default_catalogs
from .registry import CommandRegistry
from .types import ParseResult
from ...config.models import SuggestionConfig


class NLParser:
    """Parses free-text simulator instructions in English or Spanish."""

    def __init__(self, suggestion_config: Optional[SuggestionConfig] = None,
                 registry: Optional[CommandRegistry] = None):
        self.registry = registry or CommandRegistry(suggestion_config)
        if registry is None:
            for catalog in create_default_catalogs():
                self.registry.register_handler(catalog)

    def parse_instruction(self, text: str) -> ParseResult:
        """Parse text, raising CommandNotFoundError when nothing matches."""
        return self.registry.parse(text)

    def suggest_completions(self, partial_text: str) -> List[str]:
        return self.registry.suggest_completions(partial_text)

    def get_supported_commands(self) -> List[Dict[str, Any]]:
        return self.registry.list_supported_commands()

    def validate_instruction(self, text: str) -> bool:
        """True when some catalog recognizes the text."""
        return any(handler.parse_command(text) for handler in self.registry.get_command_handlers())
