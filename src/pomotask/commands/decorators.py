"""Decorators for command functions."""

import asyncio
import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomotask.exceptions import PomotaskError
from pomotask.utils.logger import get_logger
from pomotask.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable) -> Callable:
    """Log the command, run it (awaiting coroutines) and turn errors into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("commands")
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if asyncio.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except (AppError, PomotaskError) as e:
            logger.error(
                "command failed: %s (%.3fs) - %s", cmd, time.monotonic() - start, e
            )
            format_error(str(e))
            raise typer.Exit(code=getattr(e, "exit_code", 1)) from e

        except (typer.Exit, typer.Abort, typer.BadParameter):
            raise

        except Exception as e:
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                time.monotonic() - start,
                e,
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=1) from e

    return wrapper
