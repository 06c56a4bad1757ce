"""Built-in commands of the shell and the state they act on."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from hshell.environment import Environment
from hshell.errors import (
    IllegalNumberError,
    exit_status,
    format_cd_error,
    format_env_error,
    format_exit_error,
)

_HOME_ALIASES = frozenset({"$HOME", "~", "--"})
_DOT_TARGETS = frozenset({".", ".."})


@dataclass
class ShellState:
    """What a running shell carries between commands."""

    env: Environment = field(default_factory=Environment.from_os)
    program: str = "hsh"
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with a status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"exit status {status}")
        self.status = status


def _write(state: ShellState, text: str) -> None:
    state.stdout.write(text)
    state.stdout.flush()


def _report(state: ShellState, text: str) -> None:
    state.stderr.write(text)
    state.stderr.flush()


def _cd_home(state: ShellState, argv: Sequence[str]) -> None:
    cwd = os.getcwd()
    home = state.env.get("HOME")
    if home is None:
        state.env.set("OLDPWD", cwd)
        return
    try:
        os.chdir(home)
    except OSError:
        shown = list(argv) if len(argv) > 1 else [argv[0], home]
        _report(state, format_cd_error(state.program, shown))
        return
    state.env.set("OLDPWD", cwd)
    state.env.set("PWD", home)


def _cd_previous(state: ShellState) -> None:
    cwd = os.getcwd()
    old = state.env.get("OLDPWD")
    target = cwd if old is None else old
    state.env.set("OLDPWD", cwd)
    try:
        os.chdir(target)
    except OSError:
        state.env.set("PWD", cwd)
    else:
        state.env.set("PWD", target)
    pwd = state.env.get("PWD") or cwd
    _write(state, pwd + "\n")
    try:
        os.chdir(pwd)
    except OSError:
        pass


def _cd_dot(state: ShellState, target: str) -> None:
    cwd = os.getcwd()
    state.env.set("OLDPWD", cwd)
    if target == ".":
        state.env.set("PWD", cwd)
        return
    if cwd == "/":
        return
    parent = cwd.rstrip("/").rpartition("/")[0] or "/"
    try:
        os.chdir(parent)
    except OSError:
        pass
    state.env.set("PWD", parent)


def _cd_to(state: ShellState, argv: Sequence[str]) -> None:
    cwd = os.getcwd()
    try:
        os.chdir(argv[1])
    except OSError:
        _report(state, format_cd_error(state.program, argv))
        return
    state.env.set("OLDPWD", cwd)
    state.env.set("PWD", os.getcwd())


def change_directory(state: ShellState, argv: Sequence[str]) -> None:
    """Run ``cd``: home, previous directory, ``.``/``..`` or a given path."""
    target = argv[1] if len(argv) > 1 else None
    if target is None or target in _HOME_ALIASES:
        _cd_home(state, argv)
    elif target == "-":
        _cd_previous(state)
    elif target in _DOT_TARGETS:
        _cd_dot(state, target)
    else:
        _cd_to(state, argv)


def print_env(state: ShellState) -> None:
    """Print every environment entry on its own line."""
    for entry in state.env:
        _write(state, entry + "\n")


def set_env_command(state: ShellState, argv: Sequence[str]) -> None:
    """Run ``setenv NAME [VALUE]``."""
    if len(argv) < 2:
        _report(state, format_env_error(state.program, argv))
        return
    state.env.set(argv[1], argv[2] if len(argv) > 2 else None)


def unset_env_command(state: ShellState, argv: Sequence[str]) -> None:
    """Run ``unsetenv NAME``."""
    if len(argv) < 2:
        _report(state, format_env_error(state.program, argv))
        return
    try:
        state.env.unset(argv[1])
    except KeyError:
        _report(state, format_env_error(state.program, argv))


def exit_command(state: ShellState, argv: Sequence[str]) -> None:
    """Run ``exit [STATUS]`` by raising ShellExit."""
    try:
        status = exit_status(argv)
    except IllegalNumberError:
        _report(state, format_exit_error(state.program, argv))
        status = IllegalNumberError.status
    raise ShellExit(status)