import pytest

from hshell.errors import (
    IllegalNumberError,
    exit_status,
    format_cd_error,
    format_env_error,
    format_exit_error,
    format_not_found,
)

PROGRAM = "./hsh"


def test_not_found_message():
    message = format_not_found(PROGRAM, ["nosuchcmd"])
    assert message.startswith(PROGRAM + ": 1: nosuchcmd")
    assert message.endswith(": not found\n")


def test_env_error_message():
    message = format_env_error(PROGRAM, ["unsetenv", "X"])
    assert message.startswith(PROGRAM + ": 1: unsetenv")
    assert message.endswith(": Unable to add/remove from environment\n")


def test_exit_error_message():
    message = format_exit_error(PROGRAM, ["exit", "abc"])
    assert message.startswith(PROGRAM + ": 1: exit")
    assert message.endswith(": Illegal number: abc\n")


def test_cd_missing_directory_message():
    message = format_cd_error(PROGRAM, ["cd", "/no/such/dir"])
    assert message.startswith(PROGRAM + ": 1: cd")
    assert message.endswith(": can't cd to /no/such/dir\n")


def test_cd_illegal_option_keeps_only_first_flag_letter():
    message = format_cd_error(PROGRAM, ["cd", "-xyz"])
    assert ": Illegal option " in message
    assert message.endswith("-x\n")
    assert "xyz" not in message


def test_exit_without_argument_is_zero():
    assert exit_status(["exit"]) == 0


def test_exit_with_number():
    assert exit_status(["exit", "98"]) == 98


def test_exit_int_max_is_accepted():
    assert exit_status(["exit", "2147483647"]) == 2147483647


@pytest.mark.parametrize(
    "argument",
    ["abc", "-1", "12a", "2147483648", "12345678901", "99999999999"],
)
def test_exit_illegal_numbers(argument):
    with pytest.raises(IllegalNumberError) as info:
        exit_status(["exit", argument])
    assert info.value.argument == argument
    assert info.value.status == 2


def test_illegal_number_is_value_error():
    with pytest.raises(ValueError):
        exit_status(["exit", "x"])