"""
Adapters between the parser and the orchestrator.
"""

from .parser_to_orchestrator import ParserToOrchestrator, COMMAND_MAPPINGS

__all__ = ["ParserToOrchestrator", "COMMAND_MAPPINGS"]
