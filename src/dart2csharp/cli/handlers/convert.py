"""
Convert Command Handler.

This module implements the logic for the `dart2csharp convert` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Conversion of a single file or a directory tree of ``*.dart`` files.
3. Atomic output writing and optional trace logging.

Exit status reflects file I/O only; the conversion itself cannot fail.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from rich.table import Table

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.conversion_result import ConversionResult
from dart2csharp.core.engine import TranspileEngine
from dart2csharp.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
)


def handle_convert(
  input_path: Path,
  output_path: Optional[Path],
  strip_imports: Optional[bool] = None,
  null_literal: Optional[str] = None,
  extra_keywords: Optional[List[str]] = None,
  json_trace_path: Optional[Path] = None,
) -> int:
  """
  Handles the 'convert' command execution.

  Args:
      input_path: Path to the Dart file or directory to convert.
      output_path: Destination file (or directory for directory input). For a
          single file it defaults to the input path with the configured suffix.
      strip_imports: Override for directive stripping.
      null_literal: Override for the default-value literal.
      extra_keywords: Additional reserved words.
      json_trace_path: Optional path to dump header trace JSON.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  # 1. Load Configuration (TOML + CLI overrides)
  try:
    config = RuntimeConfig.load(
      null_literal=null_literal,
      strip_imports=strip_imports,
      extra_keywords=extra_keywords,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  engine = TranspileEngine(config)
  batch_results: Dict[str, ConversionResult] = {}

  # 2. Process Input (File vs Directory)
  if input_path.is_file():
    dest = output_path or input_path.with_suffix(config.output_suffix)
    result = _convert_single_file(input_path, dest, engine, json_trace_path)
    return 0 if result.success and not result.has_errors else 1

  if not output_path:
    log_error("Directory conversion requires --out destination directory.")
    return 1

  dart_files = sorted(input_path.rglob("*.dart"))
  if not dart_files:
    log_warning(f"No .dart files found in {input_path}")
    return 0

  log_info(f"Processing {len(dart_files)} files from {input_path}...")

  for src_file in dart_files:
    rel_path = src_file.relative_to(input_path)
    dest_file = (output_path / rel_path).with_suffix(config.output_suffix)
    batch_trace = dest_file.with_suffix(".trace.json") if json_trace_path else None

    result = _convert_single_file(src_file, dest_file, engine, batch_trace)
    batch_results[str(rel_path)] = result

  _print_batch_summary(batch_results)
  return 0 if all(r.success and not r.has_errors for r in batch_results.values()) else 1


def _write_atomic(path: Path, content: str) -> None:
  """
  Writes a file so that readers see either the old or the complete new content.

  Args:
      path: Destination path.
      content: Text to write.

  Raises:
      OSError: If the temporary file cannot be written or moved into place.
  """
  tmp_path = path.with_name(f".{path.name}.tmp")
  try:
    with open(tmp_path, "wt", encoding="utf-8") as f:
      f.write(content)
    os.replace(tmp_path, path)
  except OSError:
    if tmp_path.exists():
      tmp_path.unlink()
    raise


def _convert_single_file(
  input_path: Path,
  output_path: Path,
  engine: TranspileEngine,
  json_trace_path: Optional[Path] = None,
) -> ConversionResult:
  """
  Converts one file and writes the result.

  Args:
      input_path: Source file path.
      output_path: Destination file path.
      engine: Configured engine.
      json_trace_path: Path to save the header trace.

  Returns:
      ConversionResult: Result object; `success` is False on I/O failure.
  """
  try:
    with open(input_path, "rt", encoding="utf-8") as f:
      code = f.read()
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {input_path}: {e}")
    return ConversionResult(success=False, errors=[str(e)])

  result = engine.run(code)

  try:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _write_atomic(output_path, result.code)
  except OSError as e:
    log_error(f"Failed to write {output_path}: {e}")
    return ConversionResult(success=False, errors=[str(e)], trace_events=result.trace_events)

  log_success(
    f"Transpiled: [path]{input_path}[/path] -> [path]{output_path}[/path] "
    f"({result.rewritten_count} headers rewritten, {result.kept_count} kept)"
  )

  if json_trace_path:
    try:
      json_trace_path.parent.mkdir(parents=True, exist_ok=True)
      with open(json_trace_path, "wt", encoding="utf-8") as f:
        json.dump(result.trace_events, f, indent=2)
      log_info(f"Trace saved to [path]{json_trace_path}[/path]")
    except OSError as e:
      log_error(f"Failed to write trace: {e}")
      result.errors.append(f"Trace not written: {e}")

  return result


def _print_batch_summary(results: Dict[str, ConversionResult]) -> None:
  """
  Prints per-file header counts for a directory run.

  Args:
      results: Relative filename -> conversion result, in processing order.
  """
  table = Table(title="Header Rewrites")
  table.add_column("File", style="cyan")
  table.add_column("Rewritten", justify="right")
  table.add_column("Kept", justify="right")
  table.add_column("Status")

  failed = 0
  for filename, res in results.items():
    if not res.success:
      table.add_row(filename, "-", "-", f"❌ {'; '.join(res.errors)}")
    elif res.has_errors:
      table.add_row(filename, str(res.rewritten_count), str(res.kept_count), f"⚠️ {'; '.join(res.errors)}")
    else:
      table.add_row(filename, str(res.rewritten_count), str(res.kept_count), "✅")
      continue
    failed += 1

  console.print(table)

  if failed:
    log_error(f"{failed}/{len(results)} files had I/O problems.")
  else:
    rewritten = sum(r.rewritten_count for r in results.values())
    log_success(f"Batch complete: {len(results)} files, {rewritten} headers rewritten.")
