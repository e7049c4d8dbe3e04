"""
Core parsing components of Sim Commander.
"""

from .commands import CommandRegistry, NLParser, ParseResult

__all__ = ["CommandRegistry", "NLParser", "ParseResult"]
