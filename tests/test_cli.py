import io
import signal

from hshell import cli
from hshell.builtins import ShellState
from hshell.environment import Environment
from hshell.errors import format_not_found


def make_state(*entries):
    return ShellState(
        env=Environment(entries),
        program="hsh",
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )


def test_read_lines_strips_newlines():
    assert list(cli.read_lines(io.StringIO("ls -l\npwd\n"))) == ["ls -l", "pwd"]


def test_read_lines_keeps_last_partial_line():
    assert list(cli.read_lines(io.StringIO("one\ntwo"))) == ["one", "two"]


def test_run_empty_input_prompts_once():
    state = make_state()
    assert cli.run(state, io.StringIO("")) == 0
    assert state.stdout.getvalue() == cli.PROMPT


def test_run_comment_line_is_ignored():
    state = make_state()
    assert cli.run(state, io.StringIO("# just a comment\n")) == 0
    assert state.stdout.getvalue() == cli.PROMPT * 2


def test_run_blank_line_is_ignored():
    state = make_state()
    assert cli.run(state, io.StringIO("    \n")) == 0
    assert state.stdout.getvalue() == cli.PROMPT * 2
    assert state.stderr.getvalue() == ""


def test_run_setenv_then_env():
    state = make_state()
    status = cli.run(state, io.StringIO("setenv FOO bar\nenv\n"))
    assert status == 0
    assert state.stdout.getvalue() == cli.PROMPT * 2 + "FOO=bar\n" + cli.PROMPT


def test_run_trailing_comment_removed():
    state = make_state()
    cli.run(state, io.StringIO("setenv A 1 # note\n"))
    assert state.env.get("A") == "1"


def test_run_exit_stops_and_returns_status():
    state = make_state()
    status = cli.run(state, io.StringIO("exit 4\nsetenv LATER 1\n"))
    assert status == 4
    assert state.env.get("LATER") is None


def test_run_reports_unknown_command():
    state = make_state()
    cli.run(state, io.StringIO("no-such-command-hshell\n"))
    assert state.stderr.getvalue() == format_not_found("hsh", ["no-such-command-hshell"])


def test_main_returns_exit_status(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit 5\n"))
    output = io.StringIO()
    monkeypatch.setattr("sys.stdout", output)
    before = signal.getsignal(signal.SIGINT)
    assert cli.main(["hsh"]) == 5
    assert output.getvalue() == cli.PROMPT
    assert signal.getsignal(signal.SIGINT) is before


def test_main_ends_at_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    monkeypatch.setattr("sys.stdout", io.StringIO())
    assert cli.main(["hsh"]) == 0