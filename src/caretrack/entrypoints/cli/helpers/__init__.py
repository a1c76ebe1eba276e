"""CLI helpers: status lines, ``-L`` parsing and patient tables."""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .rendering import print_patients

__all__ = ["error", "parse_log_level", "print_patients", "success", "warn"]
