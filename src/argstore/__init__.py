"""
argstore - typed lookups of command-line flags.

This package answers point queries against a process's argument vector: is a
flag present, and which boolean, integer, floating point or string value
follows it. A flag is named by one or more alias spellings joined with "|",
e.g. "-h|--help|help". Missing or malformed values fall back to defaults; the
safe_* queries report them as Result errors instead.
"""

from .conversions import FALSE_VALUES, TRUE_VALUES
from .store import ArgStore

__version__ = "1.0.0"
__all__ = ["ArgStore", "TRUE_VALUES", "FALSE_VALUES"]
