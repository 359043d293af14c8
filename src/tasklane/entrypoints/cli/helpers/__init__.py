"""CLI helpers for TASKLANE.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji→ASCII fallbacks, and the parser for per-logger levels.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "success", "warn"]
