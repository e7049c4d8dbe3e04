"""
Command-line argument parser for Sim Commander.
"""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sim-commander",
        description="Sim Commander - drive iOS simulators with plain English or Spanish instructions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sim-commander --parse "launch app com.apple.mobilesafari"
  sim-commander --run "create session" "tap at 100, 200" --stop-on-error
  sim-commander --suggest "list sim"
  sim-commander --list-commands
  sim-commander --help-topic ui
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version="Sim Commander 0.1.0"
    )

    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON instead of text"
    )

    action_group = parser.add_mutually_exclusive_group()

    action_group.add_argument(
        "--parse",
        type=str,
        metavar="TEXT",
        help="Parse an instruction and show the resulting command"
    )

    action_group.add_argument(
        "--run",
        type=str,
        nargs="+",
        metavar="TEXT",
        help="Execute one or more instructions against the dry-run backend"
    )

    action_group.add_argument(
        "--suggest",
        type=str,
        metavar="TEXT",
        help="Suggest completions for partially typed text"
    )

    action_group.add_argument(
        "--list-commands",
        action="store_true",
        help="List every supported command"
    )

    action_group.add_argument(
        "--help-topic",
        type=str,
        nargs="?",
        const="help",
        metavar="TOPIC",
        help="Show help for a category, a command or a search term"
    )

    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="With several --run instructions, stop at the first failure"
    )

    parser.add_argument(
        "--active-session",
        action="store_true",
        help="Tailor --help-topic output to an already running session"
    )

    return parser


def parse_args(args=None):
    """Parse command line arguments."""
    parser = create_parser()
    return parser.parse_args(args)
