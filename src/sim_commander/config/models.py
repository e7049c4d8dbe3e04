"""
Pydantic models for Sim Commander configuration validation.
"""

from typing import List, Optional
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppConfig(BaseModel):
    """Application-level configuration settings."""

    name: str = Field(default="Sim Commander", description="Application display name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    verbose_logging: bool = Field(default=False, description="Enable verbose debug logging")

    log_to_console: bool = Field(default=True, description="Write log records to stderr")
    log_file: Optional[str] = Field(default=None, description="Rotating JSON log file location")
    max_log_size_mb: int = Field(default=10, ge=1, le=1000, description="Maximum log file size")
    backup_count: int = Field(default=5, ge=1, le=100, description="Number of backup log files")
    log_format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Console log format string"
    )

    @field_validator('log_file')
    @classmethod
    def expand_path(cls, v):
        """Expand user home directory in paths."""
        if v is None:
            return v
        return str(Path(v).expanduser())


DEFAULT_POPULAR_COMMANDS = [
    "create session",
    "list simulators",
    "install app",
    "launch app",
    "terminate session",
]


class SuggestionConfig(BaseModel):
    """Thresholds used when building suggestions and completions."""

    command_max_results: int = Field(default=3, ge=0, le=20, description="Command-name suggestions on parse failure")
    command_min_score: float = Field(default=0.3, ge=0.0, le=1.0, description="Minimum score for command-name suggestions")
    example_max_results: int = Field(default=3, ge=0, le=20, description="Example suggestions on parse failure")
    example_min_score: float = Field(default=0.2, ge=0.0, le=1.0, description="Minimum score for example suggestions")
    max_suggestions: int = Field(default=5, ge=0, le=20, description="Cap on the combined suggestion list")

    completion_max_results: int = Field(default=5, ge=1, le=50, description="Maximum completions returned")
    completion_min_score: float = Field(default=0.3, ge=0.0, le=1.0, description="Minimum score for completions")
    popular_commands: List[str] = Field(
        default_factory=lambda: list(DEFAULT_POPULAR_COMMANDS),
        description="Completions offered for blank input"
    )


class ExecutionConfig(BaseModel):
    """Defaults applied by the command executor."""

    default_timeout_seconds: Optional[float] = Field(default=30.0, gt=0.0, le=3600.0, description="Per-attempt timeout when a command sets none")
    default_retries: int = Field(default=0, ge=0, le=10, description="Retries when a command sets none")
    retry_delay_seconds: float = Field(default=0.5, ge=0.0, le=60.0, description="Delay between retry attempts")


class HelpConfig(BaseModel):
    """Help system tuning."""

    category_min_score: float = Field(default=0.4, ge=0.0, le=1.0, description="Minimum score for category suggestions")
    command_min_score: float = Field(default=0.3, ge=0.0, le=1.0, description="Minimum score for command suggestions")
    search_min_score: float = Field(default=0.2, ge=0.0, le=1.0, description="Minimum score for search hits")
    examples_per_command: int = Field(default=2, ge=1, le=10, description="Examples shown per command in category help")


class SimCommanderConfig(BaseModel):
    """Main configuration model."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    app: AppConfig = Field(default_factory=AppConfig)
    suggestions: SuggestionConfig = Field(default_factory=SuggestionConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    help: HelpConfig = Field(default_factory=HelpConfig)

    @model_validator(mode='after')
    def validate_suggestion_budget(self):
        """The combined suggestion cap can never be below the command share."""
        if self.suggestions.max_suggestions < self.suggestions.command_max_results:
            raise ValueError(
                "suggestions.max_suggestions must be >= suggestions.command_max_results"
            )
        return self
