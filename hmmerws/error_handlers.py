#!/usr/bin/env python3
"""
Error reporting for hmmerws.

Service and parsing code logs failures through log_exception so that the
request URL and other details end up in the log line; the CLI entry point
is wrapped in handle_exceptions, which turns exceptions into exit codes:

    0    success
    1    HmmerWSError (bad input, unreachable service, missing file, ...)
    2    anything unexpected
    130  interrupted
"""
import sys
import traceback
import logging
from functools import wraps
from typing import Callable, TypeVar, Any, Dict, Optional, Union

from .exceptions import HmmerWSError

T = TypeVar('T')


def _describe(context: Dict[str, Any]) -> str:
    return ", ".join(f"{key}={value}" for key, value in sorted(context.items()))


def format_error(error: Exception, verbose: bool = False) -> str:
    """Format an error message for the terminal

    Args:
        error: Exception object
        verbose: Include the error details (or traceback for unexpected errors)

    Returns:
        Formatted error message
    """
    if isinstance(error, HmmerWSError):
        msg = f"{error.__class__.__name__}: {error.message}"
        if verbose and error.details:
            msg += f"\nDetails: {error.details}"
        return msg

    if verbose:
        return f"Unexpected Error ({error.__class__.__name__}): {error}\n{traceback.format_exc()}"
    return f"Unexpected Error: {error}"


def log_exception(logger: logging.Logger,
                  error: Exception,
                  level: int = logging.ERROR,
                  context: Optional[Dict[str, Any]] = None,
                  exc_info: bool = True) -> None:
    """Log an exception together with its context

    The details of an HmmerWSError are merged with ``context`` and appended
    to the message as ``key=value`` pairs, e.g.
    ``ServiceError: Could not submit search (url=https://...)``. The merged
    mapping is also attached to the record as ``record.context``.
    """
    if isinstance(error, HmmerWSError):
        name = error.__class__.__name__
        ctx = {**error.details, **(context or {})}
    else:
        name = f"Unexpected {error.__class__.__name__}"
        ctx = dict(context or {})

    message = f"{name}: {error}"
    if ctx:
        message += f" ({_describe(ctx)})"

    logger.log(level, message, extra={"context": ctx}, exc_info=exc_info)


def handle_exceptions(func: Callable[..., T]) -> Callable[..., Union[T, int]]:
    """Decorator mapping exceptions raised by a command to exit codes"""
    @wraps(func)
    def wrapper(*args, **kwargs) -> Union[T, int]:
        logger = logging.getLogger(func.__module__)
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            print("\nOperation cancelled by user", file=sys.stderr)
            return 130
        except HmmerWSError as e:
            # expected failures; no traceback
            log_exception(logger, e, exc_info=False)
            print(format_error(e), file=sys.stderr)
            return 1
        except Exception as e:
            log_exception(logger, e)
            print(format_error(e), file=sys.stderr)
            print("See log for details. Run with --verbose for more information.", file=sys.stderr)
            return 2
    return wrapper
