"""
Exit codes for TinyTodo CLI.

Scripts driving `tinytodo run` can branch on these codes.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments, unknown intent or bad view mode
ERROR_INVALID_ARGS = 2

# Configuration could not be loaded, validated or saved
ERROR_CONFIG = 3


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIG: "ERROR_CONFIG",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or unknown intent",
        ERROR_CONFIG: "Configuration error - check 'tinytodo config view'",
    }
    return descriptions.get(code, "Unknown error")
