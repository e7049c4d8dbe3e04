"""
Main entry point for the Sim Commander CLI application.

Called from the installed ``sim-commander`` console script or with
``python -m sim_commander``.
"""

import sys

from .cli import parse_args, handle_cli_command


def main(argv=None) -> int:
    """Main entry point for Sim Commander."""
    args = parse_args(argv)
    return handle_cli_command(args)


if __name__ == "__main__":
    sys.exit(main())
