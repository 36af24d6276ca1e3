"""Fatal error reporting."""

import sys


class FatalError(Exception):
    """An unrecoverable error; the program should report it and exit."""

    exit_code = 1

    def __init__(self, message):
        super().__init__(message)
        self.message = message


def _current_error_text():
    error = sys.exc_info()[1]
    if error is None:
        return None
    strerror = getattr(error, "strerror", None)
    return strerror if strerror else str(error)


def die(fmt, *args):
    """Raise FatalError with a printf-style message.

    A message whose format ends in ':' gets the text of the error being
    handled, if any, appended after a space.
    """
    message = fmt % args if args else fmt
    if fmt.endswith(":"):
        detail = _current_error_text()
        if detail:
            message = f"{message} {detail}"
    raise FatalError(message)