"""
Command registry: ordered catalogs, parsing and suggestions.
"""

from typing import Any, Dict, List, Optional

from .definitions import BaseCommandDefinition
from .types import CommandDefinition, CommandSummary, EnhancedError, ErrorType, ParseResult
from ...config.models import SuggestionConfig
from ...utils.error_handling import CommandNotFoundError, validate_input
from ...utils.fuzzy_match import FuzzyMatcher
from ...utils.logging import get_logger

HELP_HINT = 'Try using "help" to see available commands or "help <category>" for specific command groups.'


def _unique(items: List[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


class CommandRegistry:
    """
    Holds the registered catalogs and resolves text against them.

    Catalogs are consulted in registration order; the first catalog that
    recognizes the text wins.
    """

    def __init__(self, suggestion_config: Optional[SuggestionConfig] = None):
        self.config = suggestion_config or SuggestionConfig()
        self.logger = get_logger(__name__)
        self._handlers: List[BaseCommandDefinition] = []

    def register_handler(self, handler: BaseCommandDefinition) -> None:
        validate_input(handler, "handler", BaseCommandDefinition)
        self._handlers.append(handler)
        self.logger.debug(
            f"Registered catalog {type(handler).__name__} ({len(handler.definitions)} commands)"
        )

    def get_command_handlers(self) -> List[BaseCommandDefinition]:
        return list(self._handlers)

    def get_definitions(self) -> List[CommandDefinition]:
        return [definition for handler in self._handlers for definition in handler.definitions]

    def _command_names(self) -> List[str]:
        return [definition.command for definition in self.get_definitions()]

    def _examples(self) -> List[str]:
        return [example for definition in self.get_definitions() for example in definition.examples]

    def parse(self, text: str) -> ParseResult:
        """
        Resolve an instruction to a command.

        Args:
            text: Raw instruction

        Returns:
            ParseResult of the first catalog that recognizes the text

        Raises:
            CommandNotFoundError: If no catalog recognizes the text
        """
        for handler in self._handlers:
            result = handler.parse_command(text)
            if result:
                return result

        enhanced_error = self.build_enhanced_error(text)
        self.logger.info(
            f"No command matched '{text.strip()}' ({len(enhanced_error.suggestions)} suggestions)"
        )
        raise CommandNotFoundError(enhanced_error)

    def build_enhanced_error(self, text: str) -> EnhancedError:
        """Build the command_not_found error with fuzzy suggestions for the text."""
        command_suggestions = [
            match.item for match in FuzzyMatcher.find_matches(
                text, self._command_names(),
                self.config.command_max_results, self.config.command_min_score
            )
        ]
        example_suggestions = [
            match.item for match in FuzzyMatcher.find_matches(
                text, self._examples(),
                self.config.example_max_results, self.config.example_min_score
            )
        ]
        suggestions = _unique(command_suggestions + example_suggestions)[:self.config.max_suggestions]

        message = f'Could not understand the instruction: "{text}"'
        if suggestions:
            message += "\n\nDid you mean one of these?\n" + "\n".join(f"• {s}" for s in suggestions)
        else:
            message += f"\n\n{HELP_HINT}"

        return EnhancedError(
            message=message,
            suggestions=suggestions,
            type=ErrorType.COMMAND_NOT_FOUND,
            original_input=text,
        )

    def suggest_completions(self, partial_text: str) -> List[str]:
        """Suggest commands or examples for partially typed text."""
        if not partial_text.strip():
            return list(self.config.popular_commands)

        candidates = _unique(self._command_names() + self._examples())
        matches = FuzzyMatcher.find_matches(
            partial_text, candidates,
            self.config.completion_max_results, self.config.completion_min_score
        )
        return [match.item for match in matches]

    def list_supported_commands(self) -> List[Dict[str, Any]]:
        return [CommandSummary.from_definition(d).to_dict() for d in self.get_definitions()]
