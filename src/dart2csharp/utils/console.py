"""
Console Output and Logging.

Every message of the package goes through the ``dart2csharp`` logger, which
owns a single `RichHandler`. The handler writes to a rich `Console` held by
the module-level `console` proxy; `set_console` swaps that console (e.g. for a
recording console in tests) and re-binds the handler, so modules that
imported `console` earlier keep working.

Core modules log per-header decisions at DEBUG through
``logging.getLogger(__name__)``; they become visible with `set_verbose(True)`.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

PACKAGE_LOGGER = "dart2csharp"

# Between INFO (20) and WARNING (30)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "path": "bold blue",
  }
)

_logger = logging.getLogger(PACKAGE_LOGGER)


def _bind_handler(target: Console) -> None:
  for handler in list(_logger.handlers):
    if isinstance(handler, RichHandler):
      _logger.removeHandler(handler)

  _logger.addHandler(
    RichHandler(
      console=target,
      show_time=False,
      show_path=False,
      markup=True,
    )
  )
  _logger.setLevel(logging.INFO)
  # Records stop here; root handlers never see them
  _logger.propagate = False


class _ConsoleProxy:
  """
  Stable handle on the active rich `Console`.

  Attribute access (``print``, ``export_text``, ...) is forwarded to the
  current backend.
  """

  def __init__(self) -> None:
    self._backend = Console(theme=_THEME)
    _bind_handler(self._backend)

  def swap(self, backend: Console) -> None:
    self._backend = backend
    _bind_handler(backend)

  @property
  def backend(self) -> Console:
    return self._backend

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Routes printing and logging to `new_console`.

  Args:
      new_console (Console): Replacement backend, e.g. ``Console(record=True)``.
  """
  console.swap(new_console)


def reset_console() -> None:
  """Restores a fresh stdout console and the default INFO level."""
  console.swap(Console(theme=_THEME))


def get_console() -> Console:
  return console.backend


def set_verbose(verbose: bool) -> None:
  """
  Shows or hides DEBUG records of the package loggers.

  Args:
      verbose (bool): True to log every header decision.
  """
  _logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def log_info(msg: str) -> None:
  _logger.info(f"ℹ️  {msg}")


def log_success(msg: str) -> None:
  _logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}")


def log_warning(msg: str) -> None:
  _logger.warning(f"⚠️  {msg}")


def log_error(msg: str) -> None:
  """
  Reports a failure that changes the exit status.

  Args:
      msg (str): Message text; rich markup such as ``[path]`` is allowed.
  """
  _logger.error(f"❌ {msg}")
