"""Command-line front end for pureconf."""

from pureconf.ui.cli import CLIError, build_parser, load_program, run_cli
from pureconf.ui.render import CLIRenderer, create_renderer

__all__ = ["CLIError", "CLIRenderer", "build_parser", "create_renderer", "load_program", "run_cli"]
