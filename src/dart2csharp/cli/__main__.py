"""
Main Entry Point for the dart2csharp CLI.

This module handles argument parsing and dispatches to the command handlers
in `dart2csharp.cli.handlers`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dart2csharp import __version__
from dart2csharp.cli import handlers
from dart2csharp.utils.console import set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="dart2csharp: Dart to C# function header rewriter")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Log every header decision")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Convert a Dart file or directory")
  cmd_conv.add_argument("path", type=Path, help="Input .dart file or directory")
  cmd_conv.add_argument("--out", type=Path, default=None, help="Output file (or directory for directory input)")
  cmd_conv.add_argument(
    "--keep-imports",
    action="store_true",
    help="Do not strip import directives (Overrides config)",
  )
  cmd_conv.add_argument("--null-literal", default=None, help="Default value for optional parameters (default: null)")
  cmd_conv.add_argument(
    "--keyword",
    action="append",
    default=None,
    help="Extra reserved word never treated as a function name (repeatable)",
  )
  cmd_conv.add_argument("--json-trace", type=Path, default=None, help="Dump per-header decisions to a JSON file.")

  # --- Command: AUDIT ---
  cmd_audit = subparsers.add_parser("audit", help="List recognized function headers without writing output")
  cmd_audit.add_argument("path", type=Path, help="Input .dart file or directory")

  args = parser.parse_args(argv)

  if args.verbose:
    set_verbose(True)

  if args.command == "convert":
    return handlers.handle_convert(
      args.path,
      args.out,
      strip_imports=False if args.keep_imports else None,
      null_literal=args.null_literal,
      extra_keywords=args.keyword,
      json_trace_path=args.json_trace,
    )

  elif args.command == "audit":
    return handlers.handle_audit(args.path)

  return 0


if __name__ == "__main__":
  sys.exit(main())
