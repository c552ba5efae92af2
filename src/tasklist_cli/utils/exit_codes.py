"""
Exit codes for Tasklist CLI.

Scripts driving the non-interactive commands can tell a missing task apart
from bad arguments or a general failure.
"""

SUCCESS = 0
ERROR_GENERAL = 1
ERROR_INVALID_ARGS = 2  # also what click uses for usage errors
ERROR_NOT_FOUND = 5

_EXIT_CODE_NAMES = {
    SUCCESS: "SUCCESS",
    ERROR_GENERAL: "ERROR_GENERAL",
    ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
}


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for log and display purposes."""
    return _EXIT_CODE_NAMES.get(code, f"UNKNOWN({code})")
