"""Command-line argument checking."""

from collections.abc import Sequence

DEFAULT_PROGNAME = "philo"


class UsageError(Exception):
    """Raised when the command line has the wrong shape."""

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage = usage


def usage_text(progname: str) -> str:
    """Return the usage message for ``progname``."""
    return (
        f"Usage: {progname} NOP WP|TTD\n"
        "  NOP - number of philosophers\n"
        "  WP  - a positive number indicating which philosophers should die "
        "(starting from 1)\n"
        "  TTD - a negative number, indicating after how many milliseconds "
        "a philosophers should die\n"
        "\n"
        "  Either WP or TTD to be given!\n"
    )


def check_args(argv: Sequence[str]) -> tuple[str, str]:
    """Validate a full argv and return its two arguments.

    Raises UsageError unless exactly two arguments follow the program name.
    """
    if len(argv) != 3:
        progname = argv[0] if argv else DEFAULT_PROGNAME
        raise UsageError(usage_text(progname))
    return argv[1], argv[2]