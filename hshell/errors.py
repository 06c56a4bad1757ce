"""Error messages reported by the shell and exit-status parsing."""

from __future__ import annotations

from collections.abc import Sequence

from hshell.parsing import INT_MAX, is_digits, parse_int

_LINE = "1"
_UINT_MASK = 2**32 - 1
_MAX_STATUS_DIGITS = 10


class IllegalNumberError(ValueError):
    """Raised when ``exit`` is given an argument that is not a valid status."""

    status = 2

    def __init__(self, argument: str) -> None:
        super().__init__(f"Illegal number: {argument}")
        self.argument = argument


def _prefix(program: str, command: str) -> str:
    return f"{program}: {_LINE}: {command}"


def format_cd_error(program: str, argv: Sequence[str]) -> str:
    """Message for a failed ``cd``: an illegal option or a missing directory."""
    target = argv[1]
    if target.startswith("-"):
        return f"{_prefix(program, argv[0])}: Illegal option {target[:2]}\n"
    return f"{_prefix(program, argv[0])}: can't cd to {target}\n"


def format_exit_error(program: str, argv: Sequence[str]) -> str:
    """Message for ``exit`` with a bad status argument."""
    return f"{_prefix(program, argv[0])}: Illegal number: {argv[1]}\n"


def format_env_error(program: str, argv: Sequence[str]) -> str:
    """Message for a failed ``setenv`` or ``unsetenv``."""
    return f"{_prefix(program, argv[0])}: Unable to add/remove from environment\n"


def format_not_found(program: str, argv: Sequence[str]) -> str:
    """Message for a command that could not be found."""
    return f"{_prefix(program, argv[0])}: not found\n"


def exit_status(argv: Sequence[str]) -> int:
    """Status requested by an ``exit`` command line.

    No argument means 0. Raises IllegalNumberError when the argument is not
    all digits, is longer than ten digits, or exceeds the largest int.
    """
    if len(argv) < 2:
        return 0
    argument = argv[1]
    value = parse_int(argument) & _UINT_MASK
    if not is_digits(argument) or len(argument) > _MAX_STATUS_DIGITS or value > INT_MAX:
        raise IllegalNumberError(argument)
    return value