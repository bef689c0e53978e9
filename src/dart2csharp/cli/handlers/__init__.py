"""
Handlers for the individual CLI commands.
"""

from dart2csharp.cli.handlers.audit import handle_audit
from dart2csharp.cli.handlers.convert import handle_convert

__all__ = ["handle_audit", "handle_convert"]
