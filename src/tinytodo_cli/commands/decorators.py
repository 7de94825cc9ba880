"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from tinytodo_cli.models import IntentParseError, TinyTodoError
from tinytodo_cli.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS
from tinytodo_cli.utils.logger import get_logger
from tinytodo_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable) -> Callable:
    """Wrap a typer command with logging and error-to-exit-code mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except IntentParseError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=ERROR_INVALID_ARGS) from e

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # TinyTodoError here means a wiring bug, not bad user input
            prefix = "Internal error" if isinstance(e, TinyTodoError) else "An unexpected error occurred"
            format_error(f"{prefix}: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
