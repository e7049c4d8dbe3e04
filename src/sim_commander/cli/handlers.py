"""
CLI command handlers for Sim Commander.

This module contains the implementation of CLI commands, separated from
the argument parsing logic.
"""

import asyncio
import json
import sys
from typing import Any

from ..adapters.parser_to_orchestrator import ParserToOrchestrator
from ..config import load_config, ConfigurationError
from ..core.commands.catalogs import create_default_catalogs
from ..core.commands.parser import NLParser
from ..help.help_system import HelpSystem
from ..orchestrator.backend import DryRunBackend
from ..orchestrator.orchestrator import InstructionOrchestrator
from ..utils import setup_logging, get_logger, log_startup
from ..utils.error_handling import CommandNotFoundError, SimCommanderError


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def handle_cli_command(args) -> int:
    """
    Handle CLI commands based on parsed arguments.

    Returns:
        int: Exit code (0 for success, non-zero for error)
    """
    try:
        config = load_config(args.config)
        setup_logging(config, verbose=args.verbose)
        log_startup(args.config)

        if args.parse:
            return _handle_parse(config, args)
        elif args.run:
            return _handle_run(config, args)
        elif args.suggest is not None:
            return _handle_suggest(config, args)
        elif args.list_commands:
            return _handle_list_commands(config, args)
        else:
            return _handle_help(config, args)

    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1
    except SimCommanderError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


def _handle_parse(config, args) -> int:
    """Parse one instruction and show the command it maps to."""
    parser = NLParser(config.suggestions)
    try:
        parse_result = parser.parse_instruction(args.parse)
    except CommandNotFoundError as e:
        if args.json:
            _print_json(e.enhanced_error.to_dict())
        else:
            print(e.message, file=sys.stderr)
        return 1

    command = ParserToOrchestrator().convert_to_command(parse_result)

    if args.json:
        _print_json({
            "command": parse_result.command,
            "type": command.type.value,
            "parameters": command.parameters,
            "confidence": parse_result.confidence,
            "description": command.description,
        })
    else:
        print(f"Command:    {parse_result.command}")
        print(f"Type:       {command.type.value}")
        print(f"Parameters: {command.parameters}")
        print(f"Confidence: {parse_result.confidence}")
    return 0


def _handle_run(config, args) -> int:
    """Execute instructions against the dry-run backend."""
    logger = get_logger(__name__)
    orchestrator = InstructionOrchestrator(DryRunBackend(), config)

    if len(args.run) == 1:
        result = asyncio.run(orchestrator.process_instruction(args.run[0]))
    else:
        result = asyncio.run(orchestrator.process_sequence(args.run, stop_on_error=args.stop_on_error))

    logger.debug(f"Run finished with success={result.success}")

    if args.json:
        _print_json(result.to_dict())
    elif result.success:
        print("✅ Success")
        print(json.dumps(result.to_dict().get("data"), indent=2, ensure_ascii=False, default=str))
    else:
        print(f"❌ {result.error}", file=sys.stderr)

    return 0 if result.success else 1


def _handle_suggest(config, args) -> int:
    parser = NLParser(config.suggestions)
    completions = parser.suggest_completions(args.suggest)

    if args.json:
        _print_json(completions)
    else:
        for completion in completions:
            print(completion)
    return 0


def _handle_list_commands(config, args) -> int:
    parser = NLParser(config.suggestions)
    commands = parser.get_supported_commands()

    if args.json:
        _print_json(commands)
        return 0

    print(f"📋 Supported commands ({len(commands)}):")
    for command in commands:
        print(f"  {command['command']}: {command['description']}")
        if command["required_parameters"]:
            print(f"    required: {', '.join(command['required_parameters'])}")
        if command["optional_parameters"]:
            print(f"    optional: {', '.join(command['optional_parameters'])}")
    return 0


def _handle_help(config, args) -> int:
    help_system = HelpSystem(create_default_catalogs(), config.help)
    response = help_system.process_help_request(args.help_topic or "help", args.active_session)

    if args.json:
        _print_json(response.to_dict())
    else:
        print(help_system.format_help_response(response))
    return 0
