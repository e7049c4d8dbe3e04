"""
Shared types for natural-language command parsing.
"""

import re
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any, Callable, Tuple, Mapping
from enum import Enum

ParameterExtractor = Callable[[re.Match], Optional[Any]]

PARSE_CONFIDENCE = 0.9


class ErrorType(Enum):
    """Failure categories reported back to callers."""

    COMMAND_NOT_FOUND = "command_not_found"
    PARAMETER_MISSING = "parameter_missing"
    VALIDATION_FAILED = "validation_failed"
    MULTIPLE_MATCHES = "multiple_matches"


@dataclass(frozen=True)
class CommandDefinition:
    """A named command with the patterns that recognize it."""

    command: str
    patterns: Tuple[re.Pattern, ...]
    description: str
    required_parameters: Tuple[str, ...] = ()
    optional_parameters: Tuple[str, ...] = ()
    examples: Tuple[str, ...] = ()
    parameter_extractors: Mapping[str, ParameterExtractor] = field(default_factory=dict)


@dataclass
class ParseResult:
    """Outcome of a successful parse."""

    command: str
    parameters: Dict[str, Any]
    confidence: float
    original_text: str


@dataclass
class EnhancedError:
    """Parse failure with suggestions the user can act on."""

    message: str
    suggestions: List[str] = field(default_factory=list)
    type: ErrorType = ErrorType.COMMAND_NOT_FOUND
    original_input: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "suggestions": list(self.suggestions),
            "type": self.type.value,
            "original_input": self.original_input,
        }


@dataclass
class CommandSummary:
    """Flattened view of a definition for listings."""

    command: str
    description: str
    required_parameters: List[str]
    optional_parameters: List[str]

    @classmethod
    def from_definition(cls, definition: CommandDefinition) -> "CommandSummary":
        return cls(
            command=definition.command,
            description=definition.description,
            required_parameters=list(definition.required_parameters),
            optional_parameters=list(definition.optional_parameters),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
