import tblib.pickling_support


def with_note[E: BaseException](exc: E, note: str) -> E:
    """Add a note to an exception."""
    exc.add_note(note)
    return exc


@tblib.pickling_support.install
class UnwrapError(Exception):
    """Raised when an outcome holding an error is unwrapped.

    The original error payload is available as :attr:`error`.
    If the payload is itself an exception, it is also chained as the cause of this
    error.
    """

    def __init__(self, error: object):
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"UnwrapError: {self.error}"
