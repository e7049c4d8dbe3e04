"""
Base class for command catalogs and the pattern parser they share.

A catalog groups related command definitions (simulator lifecycle, app
management, UI interaction, ...). Each definition lists regular
expressions that recognize it and extractors that pull parameter values
out of a successful match.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .types import CommandDefinition, ParseResult, ParameterExtractor, PARSE_CONFIDENCE
from ...utils.error_handling import DefinitionError
from ...utils.logging import get_logger

logger = get_logger(__name__)

# Shared pattern fragments
NUMBER = r"-?\d+(?:\.\d+)?"
BUNDLE_ID = r"(?P<bundle>[a-z0-9][\w\-]*(?:\.[\w\-]+)+)"

_QUOTE_PAIRS = {'"': '"', "'": "'", "“": "”", "‘": "’"}


def compile_patterns(*patterns: str) -> Tuple[re.Pattern, ...]:
    """Compile patterns case-insensitively, preserving declaration order."""
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


def group(name: str, transform: Optional[Callable[[str], Any]] = None) -> ParameterExtractor:
    """Build an extractor that reads a named group from the match.

    Missing or blank groups yield None so the parameter is left out.
    """
    def extract(match: re.Match) -> Optional[Any]:
        value = match.groupdict().get(name)
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        return transform(value) if transform else value

    return extract


def lookup(name: str, table: Mapping[str, Any]) -> ParameterExtractor:
    """Extractor translating a named group through a table (whitespace-normalized, lowercase)."""
    return group(name, lambda value: table.get(" ".join(value.lower().split())))


def strip_quotes(value: str) -> str:
    if len(value) >= 2 and _QUOTE_PAIRS.get(value[0]) == value[-1]:
        return value[1:-1]
    return value


def split_list(value: str, fillers: Iterable[str] = ("and", "y")) -> List[str]:
    """Split a comma or whitespace separated list, dropping filler words."""
    skip = {word.lower() for word in fillers}
    return [item for item in re.split(r"[,\s]+", value) if item and item.lower() not in skip]


def define(
    command: str,
    patterns: Sequence[str],
    description: str,
    required: Sequence[str] = (),
    optional: Sequence[str] = (),
    examples: Sequence[str] = (),
    extractors: Optional[Dict[str, ParameterExtractor]] = None
) -> CommandDefinition:
    """Convenience constructor used by the catalogs."""
    return CommandDefinition(
        command=command,
        patterns=compile_patterns(*patterns),
        description=description,
        required_parameters=tuple(required),
        optional_parameters=tuple(optional),
        examples=tuple(examples),
        parameter_extractors=dict(extractors or {}),
    )


class BaseCommandDefinition(ABC):
    """
    Base class for a catalog of command definitions.

    Subclasses implement build_definitions(); the result is validated and
    frozen once at construction time.
    """

    category: str = ""
    title: str = ""

    def __init__(self):
        definitions = tuple(self.build_definitions())
        for definition in definitions:
            self._validate_definition(definition)
        self._definitions: Tuple[CommandDefinition, ...] = definitions

    @abstractmethod
    def build_definitions(self) -> List[CommandDefinition]:
        """Return the definitions of this catalog in matching order."""
        pass

    @property
    def definitions(self) -> Tuple[CommandDefinition, ...]:
        return self._definitions

    def _validate_definition(self, definition: CommandDefinition) -> None:
        if not definition.command or not definition.command.strip():
            raise DefinitionError(
                f"{type(self).__name__} contains a definition with an empty command name"
            )
        if not definition.patterns:
            raise DefinitionError(
                f"Command '{definition.command}' declares no patterns",
                details={"command": definition.command}
            )

        declared = set(definition.required_parameters) | set(definition.optional_parameters)
        undeclared = set(definition.parameter_extractors) - declared
        if undeclared:
            raise DefinitionError(
                f"Command '{definition.command}' extracts undeclared parameters: {sorted(undeclared)}",
                details={"command": definition.command, "parameters": sorted(undeclared)}
            )

    def parse_command(self, text: str) -> Optional[ParseResult]:
        """
        Try every definition of this catalog against the text.

        Matching runs on the lowercased text; the winning pattern is then
        re-run on the trimmed original so extracted values keep their case.

        Args:
            text: Raw instruction

        Returns:
            ParseResult for the first matching pattern, or None
        """
        original = text.strip()
        lowered = original.lower()

        for definition in self._definitions:
            for pattern in definition.patterns:
                match = pattern.search(lowered)
                if not match:
                    continue

                original_match = pattern.search(original) or match
                parameters: Dict[str, Any] = {}
                for name, extractor in definition.parameter_extractors.items():
                    value = extractor(original_match)
                    if value is not None:
                        parameters[name] = value

                logger.debug(f"'{original}' matched '{definition.command}' via {pattern.pattern!r}")
                return ParseResult(
                    command=definition.command,
                    parameters=parameters,
                    confidence=PARSE_CONFIDENCE,
                    original_text=text,
                )

        return None
