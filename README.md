# hshell

A small interactive command shell. It prints a `$ ` prompt, reads one command
per line from standard input, runs it, and stops at end of input or on `exit`.

## Installing

    pip install .

## Running

    hshell

Commands can also be piped in:

    echo "ls -l" | hshell

## How a line is handled

- A line that starts with `#` is ignored. Otherwise the line is cut at the
  last `#` that follows a space, a tab or a `;`; a `#` inside a word is kept.
- The rest is split on spaces into at most 100 words. Empty lines do nothing.
- If the first word is an existing path (other than `/usr/bin/env` or
  `/bin/env`), that program is run directly.
- Otherwise, if it names a built-in, the built-in runs. `/usr/bin/env` and
  `/bin/env` behave like the `env` built-in.
- Otherwise the shell runs `/usr/bin/<name>`. If that file does not exist it
  writes `<program>: 1: <name>: not found` to standard error.
- External programs are started with an empty environment, and the shell
  waits for them to finish.
- Ctrl-C at the prompt does not end the shell; it prints a new line and a
  fresh prompt.

## Built-ins

| Command             | Effect |
|---------------------|--------|
| `exit [status]`     | Leaves the shell with the given status (0 by default). |
| `env`               | Prints the shell's environment, one `NAME=value` per line. |
| `setenv NAME [VALUE]` | Sets or replaces a variable in the shell's environment; a missing value is stored as an empty string. |
| `unsetenv NAME`     | Removes a variable from the shell's environment. |
| `cd [dir]`          | Changes directory and keeps `PWD` and `OLDPWD` up to date. |

Details:

- `exit` with an argument that is not made only of digits, is longer than ten
  digits, or exceeds 2147483647 reports
  `<program>: 1: exit: Illegal number: <arg>` and leaves with status 2.
- `setenv` and `unsetenv` without a name, and `unsetenv` for a name that is
  not set, report `<program>: 1: <command>: Unable to add/remove from environment`.
- `cd` with no argument, or with `~`, `$HOME` or `--`, goes to `HOME`.
  `cd -` goes back to `OLDPWD` and prints the new directory. `cd .` and
  `cd ..` stay in place or go to the parent. A directory that cannot be entered
  is reported as `can't cd to <dir>`; an argument starting with `-` that is not
  one of the above is reported as `Illegal option`.

## Use from Python

    import io
    from hshell.builtins import ShellState
    from hshell.environment import Environment
    from hshell.cli import run

    state = ShellState(env=Environment(["HOME=/tmp"]), program="hsh")
    status = run(state, io.StringIO("setenv GREETING hello\nenv\nexit 3\n"))

`run` returns the exit status. `hshell.cli.main()` starts the shell on
standard input with a copy of the process environment. The pieces can also be
used separately: `hshell.parsing` (`strip_comment`, `split_words`,
`parse_int`, `is_digits`), `hshell.environment.Environment`,
`hshell.errors` (message formatting and `exit_status`), and
`hshell.executor.dispatch` to run one parsed command.

## What it does not do

There is no quoting, escaping, variable expansion, globbing, pipes,
redirection, `;` command lists or job control. Commands are not looked up
through `PATH`; only `/usr/bin` is tried. Error messages always give line
number 1.