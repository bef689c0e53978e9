"""
Audit Command Handler.

Lists every function header the matcher recognizes in a Dart file (or a
directory of them) together with the decision taken: rewritten, or kept and
why. Nothing is written to disk.
"""

from pathlib import Path
from typing import List

from rich.table import Table

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.cleanup import remove_imports
from dart2csharp.core.headers.matcher import HeaderTranspiler
from dart2csharp.core.headers.nodes import HeaderOutcome
from dart2csharp.utils.console import console, log_error, log_warning


def handle_audit(path: Path) -> int:
  """
  Handles the 'audit' command execution.

  Args:
      path: Dart file or directory to inspect.

  Returns:
      int: Exit code (0 for success, 1 if the input cannot be read).
  """
  if not path.exists():
    log_error(f"Input not found: {path}")
    return 1

  files = [path] if path.is_file() else sorted(path.rglob("*.dart"))
  if not files:
    log_warning(f"No .dart files found in {path}")
    return 0

  try:
    config = RuntimeConfig.load(search_path=path if path.is_dir() else path.parent)
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1
  transpiler = HeaderTranspiler(config)

  table = Table(title="Function Headers")
  table.add_column("File", style="cyan")
  table.add_column("Line", justify="right")
  table.add_column("Header", style="bold magenta")
  table.add_column("Status", justify="center")
  table.add_column("Reason")

  exit_code = 0
  for src_file in files:
    try:
      code = src_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
      log_error(f"Failed to read {src_file}: {e}")
      exit_code = 1
      continue

    if config.strip_imports:
      code = remove_imports(code, config.directives)

    outcomes: List[HeaderOutcome] = transpiler.scan(code)
    label = str(src_file.relative_to(path)) if path.is_dir() else src_file.name
    for item in outcomes:
      signature = f"{item.match.return_type} {item.match.name}" if item.match.return_type else item.match.name
      status = "✅ rewritten" if item.outcome.changed else "⏭️ kept"
      table.add_row(label, str(item.line), signature, status, item.outcome.reason)

  console.print(table)
  return exit_code
