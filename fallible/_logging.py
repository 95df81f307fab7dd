import logging
from collections.abc import Callable


def log_err(
    logger: logging.Logger,
    level: int = logging.ERROR,
    message: str = "Operation failed",
) -> Callable[[object], None]:
    """Create a callback that logs the error of an outcome.

    The returned callback is meant to be passed to ``on_err``:

    .. code-block:: python

        outcome.on_err(log_err(logger, logging.WARNING, "Could not read file"))

    If the error is an exception, its traceback is attached to the log record.
    Otherwise, the error representation is appended to the message.
    """

    def log(error: object) -> None:
        if isinstance(error, BaseException):
            logger.log(level, message, exc_info=error)
        else:
            logger.log(level, "%s: %r", message, error)

    return log
