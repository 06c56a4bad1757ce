"""Deciding how a command line runs: built-in or external program."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Sequence

from hshell.builtins import (
    ShellState,
    change_directory,
    exit_command,
    print_env,
    set_env_command,
    unset_env_command,
)
from hshell.errors import format_not_found

_ENV_PATHS = frozenset({"/usr/bin/env", "/bin/env"})
_SEARCH_DIR = "/usr/bin/"

_BUILTINS: dict[str, Callable[[ShellState, Sequence[str]], None]] = {
    "exit": exit_command,
    "env": lambda state, argv: print_env(state),
    "setenv": set_env_command,
    "unsetenv": unset_env_command,
    "cd": change_directory,
}


def run_external(state: ShellState, argv: Sequence[str]) -> int | None:
    """Run a program by path with an empty environment.

    Returns its exit status, or None when it could not be started.
    """
    path = argv[0]
    if not os.path.exists(path):
        name = path[len(_SEARCH_DIR):] if path.startswith(_SEARCH_DIR) else path
        state.stderr.write(format_not_found(state.program, [name, *argv[1:]]))
        state.stderr.flush()
        return None
    state.stdout.flush()
    try:
        completed = subprocess.run(
            list(argv), executable=os.path.abspath(path), env={}, check=False
        )
    except OSError as exc:
        state.stderr.write(f"{state.program}: {exc.strerror}\n")
        state.stderr.flush()
        return None
    return completed.returncode


def run_builtin(state: ShellState, argv: Sequence[str]) -> bool:
    """Run *argv* if it names a built-in; return whether it did."""
    name = argv[0]
    handler = _BUILTINS.get(name)
    if handler is None:
        if name in _ENV_PATHS:
            print_env(state)
            return True
        return False
    handler(state, argv)
    return True


def dispatch(state: ShellState, argv: Sequence[str]) -> None:
    """Run one parsed command line."""
    if not argv:
        return
    command = argv[0]
    if command not in _ENV_PATHS and os.path.exists(command):
        run_external(state, argv)
        return
    if run_builtin(state, argv):
        return
    run_external(state, [_SEARCH_DIR + command, *argv[1:]])