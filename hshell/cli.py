"""The interactive read-and-run loop and the command entry point."""

from __future__ import annotations

import signal
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from hshell.builtins import ShellExit, ShellState
from hshell.environment import Environment
from hshell.executor import dispatch
from hshell.parsing import split_words, strip_comment

PROMPT = "$ "


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of *stream* without their newline."""
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


def run(state: ShellState, stdin: TextIO) -> int:
    """Prompt, read and run commands until end of input or ``exit``.

    Returns the shell's exit status.
    """
    lines = read_lines(stdin)
    while True:
        state.stdout.write(PROMPT)
        state.stdout.flush()
        line = next(lines, None)
        if line is None:
            return 0
        text = strip_comment(line)
        if text is None:
            continue
        words = split_words(text)
        if not words:
            continue
        try:
            dispatch(state, words)
        except ShellExit as done:
            return done.status


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell on standard input."""
    args = list(sys.argv if argv is None else argv)
    program = args[0] if args else "hsh"
    state = ShellState(env=Environment.from_os(), program=program)

    def _on_interrupt(signum, frame):
        state.stdout.write("\n" + PROMPT)
        state.stdout.flush()

    previous = signal.signal(signal.SIGINT, _on_interrupt)
    try:
        return run(state, sys.stdin)
    finally:
        signal.signal(signal.SIGINT, previous)


if __name__ == "__main__":
    raise SystemExit(main())