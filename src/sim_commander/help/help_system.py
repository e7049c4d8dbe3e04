"""
Help system for Sim Commander.

Builds help responses from the registered catalogs: category overviews,
per-command detail, free-text search and suggestions for what to try next
depending on whether a simulator session is active.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Sequence

from ..config.models import HelpConfig
from ..core.commands.definitions import BaseCommandDefinition
from ..core.commands.types import CommandDefinition
from ..utils.fuzzy_match import FuzzyMatcher
from ..utils.logging import get_logger

CATEGORY_DETAILS = {
    "simulator": ("Create, manage, and control iOS simulators", "📱"),
    "app": ("Install, launch, and manage applications", "📦"),
    "ui": ("Interact with the simulator UI", "🖱️"),
    "accessibility": ("Access UI elements for testing", "♿"),
    "capture": ("Take screenshots, record videos and read logs", "📸"),
    "debug": ("Debug applications and analyze issues", "🐛"),
    "misc": ("Additional utilities and advanced features", "🔧"),
}

POPULAR_COMMANDS = [
    "create session",
    "list simulators",
    "install app",
    "launch app",
    "tap",
    "take screenshot",
]

GETTING_STARTED_COMMANDS = ["create session", "list simulators", "boot simulator"]
NEXT_STEP_COMMANDS = ["install app", "launch app", "tap", "take screenshot", "terminate session"]


@dataclass
class CommandCategory:
    name: str
    description: str
    icon: str
    commands: List[str]


@dataclass
class CommandHelp:
    command: str
    description: str
    examples: List[str]
    required_parameters: List[str]
    optional_parameters: List[str]

    @classmethod
    def from_definition(cls, definition: CommandDefinition,
                        max_examples: Optional[int] = None) -> "CommandHelp":
        examples = list(definition.examples)
        if max_examples is not None:
            examples = examples[:max_examples]
        return cls(
            command=definition.command,
            description=definition.description,
            examples=examples,
            required_parameters=list(definition.required_parameters),
            optional_parameters=list(definition.optional_parameters),
        )


@dataclass
class HelpResponse:
    """Structured help answer; every field is optional."""

    message: Optional[str] = None
    category: Optional[str] = None
    commands: Optional[List[CommandHelp]] = None
    suggestions: Optional[List[str]] = None
    categories: Optional[List[CommandCategory]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


class HelpSystem:
    """Answers help requests about the registered commands."""

    def __init__(self, catalogs: Sequence[BaseCommandDefinition], config: Optional[HelpConfig] = None):
        self.config = config or HelpConfig()
        self.logger = get_logger(__name__)
        self.categories: List[CommandCategory] = []
        self.definitions: List[CommandDefinition] = []

        for catalog in catalogs:
            description, icon = CATEGORY_DETAILS.get(catalog.category, (catalog.title, "•"))
            self.categories.append(CommandCategory(
                name=catalog.category,
                description=description,
                icon=icon,
                commands=[definition.command for definition in catalog.definitions],
            ))
            self.definitions.extend(catalog.definitions)

    def _find_category(self, name: str) -> Optional[CommandCategory]:
        lowered = name.strip().lower()
        return next((category for category in self.categories if category.name == lowered), None)

    def _find_definition(self, name: str) -> Optional[CommandDefinition]:
        lowered = name.strip().lower()
        return next((d for d in self.definitions if d.command.lower() == lowered), None)

    def _popular_commands(self) -> List[str]:
        return list(POPULAR_COMMANDS)

    def get_categories(self) -> HelpResponse:
        return HelpResponse(
            categories=list(self.categories),
            message='Available command categories. Use "help <category>" for detailed commands in that category.',
        )

    def get_category_help(self, category_name: str) -> HelpResponse:
        category = self._find_category(category_name)
        if category is None:
            names = [c.name for c in self.categories]
            suggestions = [
                match.item for match in FuzzyMatcher.find_matches(
                    category_name, names, 3, self.config.category_min_score
                )
            ]
            return HelpResponse(
                message=f'Category "{category_name}" not found.',
                suggestions=suggestions or names,
            )

        commands = [
            CommandHelp.from_definition(d, self.config.examples_per_command)
            for d in self.definitions if d.command in category.commands
        ]
        return HelpResponse(
            category=category.name,
            commands=commands,
            message=f"{category.icon} {category.description}",
        )

    def get_command_help(self, command_name: str) -> HelpResponse:
        definition = self._find_definition(command_name)
        if definition is None:
            suggestions = [
                match.item for match in FuzzyMatcher.find_matches(
                    command_name, [d.command for d in self.definitions], 5, self.config.command_min_score
                )
            ]
            return HelpResponse(
                message=f'Command "{command_name}" not found.',
                suggestions=suggestions or self._popular_commands(),
            )

        return HelpResponse(
            commands=[CommandHelp.from_definition(definition)],
            message=f'Detailed help for "{definition.command}"',
        )

    def search_commands(self, query: str) -> HelpResponse:
        """Fuzzy search over command names plus substring search over descriptions and examples."""
        if not query.strip():
            return HelpResponse(
                message="Please provide a search term.",
                suggestions=self._popular_commands(),
            )

        lowered = query.lower()
        names = [
            match.item for match in FuzzyMatcher.find_matches(
                query, [d.command for d in self.definitions], 10, self.config.search_min_score
            )
        ]
        for definition in self.definitions:
            if lowered in definition.description.lower() or any(
                lowered in example.lower() for example in definition.examples
            ):
                if definition.command not in names:
                    names.append(definition.command)

        if not names:
            return HelpResponse(
                message=f'No commands found matching "{query}".',
                suggestions=self._popular_commands(),
            )

        commands = [CommandHelp.from_definition(self._find_definition(name), 1) for name in names]
        return HelpResponse(
            commands=commands,
            message=f'Found {len(commands)} command(s) matching "{query}"',
        )

    def get_contextual_help(self, has_active_session: bool) -> HelpResponse:
        wanted = NEXT_STEP_COMMANDS if has_active_session else GETTING_STARTED_COMMANDS
        commands = [CommandHelp.from_definition(d, 1) for d in self.definitions if d.command in wanted]

        if has_active_session:
            message = "Active simulator session detected. Here are some common next steps:"
        else:
            message = "No active simulator session. Here are commands to get started:"
        return HelpResponse(commands=commands, message=message)

    def process_help_request(self, request: str, has_active_session: bool = False) -> HelpResponse:
        """
        Route a free-form help request.

        "help" or blank -> contextual help; "help <category>" / "help <command>";
        "categories"; "search <query>"; anything else is searched.
        """
        normalized = request.strip().lower()
        self.logger.debug(f"Help request: '{normalized}'")

        if not normalized or normalized == "help":
            return self.get_contextual_help(has_active_session)

        if normalized.startswith("help "):
            target = normalized[5:].strip()
            if self._find_category(target):
                return self.get_category_help(target)
            if self._find_definition(target):
                return self.get_command_help(target)
            return self.search_commands(target)

        if normalized in ("categories", "list categories"):
            return self.get_categories()

        if normalized.startswith("search "):
            return self.search_commands(normalized[7:].strip())

        return self.search_commands(normalized)

    def format_help_response(self, response: HelpResponse) -> str:
        """Render a help response as plain text."""
        lines: List[str] = []

        if response.message:
            lines.extend([response.message, ""])

        if response.categories:
            lines.append("Command categories:")
            for category in response.categories:
                lines.append(f"{category.icon} {category.name} - {category.description}")
            lines.extend(["", 'Use "help <category>" for commands in that category.'])

        if response.commands:
            if len(response.commands) == 1:
                command = response.commands[0]
                lines.extend([command.command, command.description, ""])
                if command.required_parameters:
                    lines.append(f"Required parameters: {', '.join(command.required_parameters)}")
                if command.optional_parameters:
                    lines.append(f"Optional parameters: {', '.join(command.optional_parameters)}")
                if command.examples:
                    lines.extend(["", "Examples:"])
                    lines.extend(f'- "{example}"' for example in command.examples)
            else:
                lines.append("Available commands:")
                for command in response.commands:
                    lines.append(f"• {command.command} - {command.description}")
                    if command.examples:
                        lines.append(f'  Example: "{command.examples[0]}"')

        if response.suggestions:
            lines.extend(["", "Did you mean:"])
            lines.extend(f"- {suggestion}" for suggestion in response.suggestions)

        return "\n".join(lines).strip()
