"""
Main Entry Point for the js-codemods CLI.

Parses arguments and dispatches to the handlers in `js_codemods.cli.commands`.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from js_codemods import __version__
from js_codemods.cli import commands
from js_codemods.config import parse_cli_key_values
from js_codemods.enums import Dialect
from js_codemods.transforms import available_transforms
from js_codemods.utils.console import log_error, set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="js-codemods: deterministic JavaScript source rewrites")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Log every pass")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: RUN ---
  cmd_run = subparsers.add_parser("run", help="Apply a transform to a source file")
  cmd_run.add_argument("transform", choices=available_transforms(), help="Transform to apply")
  cmd_run.add_argument("path", type=Path, help="Input source file")
  cmd_run.add_argument("--out", type=Path, default=None, help="Output file (default: stdout)")
  cmd_run.add_argument(
    "--parser",
    choices=[d.value for d in Dialect],
    default=None,
    help="Parser dialect (default: from toml, else tsx)",
  )
  cmd_run.add_argument(
    "--set",
    nargs="*",
    dest="settings",
    help="Configuration overrides in key=value format (e.g. helper_path=app/utils)",
  )

  # --- Command: LIST ---
  subparsers.add_parser("list", help="Show available transforms")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "run":
    try:
      settings = parse_cli_key_values(args.settings)
    except ValueError as e:
      log_error(str(e))
      return 2
    return commands.handle_run(args.transform, args.path, args.out, args.parser, settings)

  if args.command == "list":
    return commands.handle_list()

  return 1
