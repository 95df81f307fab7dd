"""Defines the outcome type and its variants: ok and err.

The Outcome type is a union type of Ok and Err, where Ok contains the value of a
successful computation and Err contains the error that made it fail.

It is meant to be used as a return type for functions that can fail, but where we
want failures to be values handled by the calling code rather than exceptions that
propagate.

Example:
    .. code-block:: python

        from typing import assert_never

        from fallible import Ok, Err, Outcome, is_ok, is_err_type

        def read_file(file_path: str) -> Outcome[str, FileNotFoundError]:
            try:
                with open(file_path) as file:
                    return Ok(file.read())
            except FileNotFoundError as error:
                return Err(error)

        outcome = read_file("file.txt")
        if is_err_type(outcome, FileNotFoundError):
            print("File not found")
        elif is_ok(outcome):
            print(outcome.value)
        else:
            assert_never(outcome)

Outcomes can be transformed without unpacking them with ``map``, ``flat_map`` and
``map_error``, gathered with :func:`combine`, and produced from coroutines with
:func:`from_async`.
"""

from ._exceptions import UnwrapError
from ._logging import log_err
from ._outcome import (
    Err,
    Ok,
    Outcome,
    combine,
    from_async,
    is_err,
    is_err_type,
    is_ok,
)

__all__ = [
    "Err",
    "Ok",
    "Outcome",
    "UnwrapError",
    "combine",
    "from_async",
    "is_err",
    "is_err_type",
    "is_ok",
    "log_err",
]
