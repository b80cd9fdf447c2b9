"""Test cases for environment variable expansion in config paths."""

import pytest

from symlinker.interpolation import EnvExpander, expand_env_vars, has_unexpanded_variable
from symlinker.reader import parse_line
from tests.conftest import cleanup_env_vars, set_env_vars

ENVIRON = {"HOME": "/home/u", "TOOLS_DIR": "/opt/tools", "XDG_CONFIG_HOME": "/home/u/.config"}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("$HOME/.zshrc", "/home/u/.zshrc"),
        ("${XDG_CONFIG_HOME}/nvim", "/home/u/.config/nvim"),
        ("$HOME/$TOOLS_DIR", "/home/u//opt/tools"),
        ("${HOME}suffix", "/home/usuffix"),
        ("/plain/path", "/plain/path"),
        ("$UNDEFINED_VAR/.foo", "/.foo"),
        ("${UNDEFINED_VAR}", ""),
    ],
)
def test_expand_env_vars(raw: str, expected: str):
    assert expand_env_vars(raw, ENVIRON) == expected


@pytest.mark.parametrize("raw", ["price$", "/tmp/$/x", "$/home"])
def test_dollar_without_a_name_is_kept(raw: str):
    assert expand_env_vars(raw, ENVIRON) == raw
    assert has_unexpanded_variable(expand_env_vars(raw, ENVIRON))


def test_expand_env_vars_reads_process_environment():
    set_env_vars(SYMLINKER_TEST_DIR="/srv/dotfiles")

    try:
        assert expand_env_vars("$SYMLINKER_TEST_DIR/vimrc") == "/srv/dotfiles/vimrc"
    finally:
        cleanup_env_vars("SYMLINKER_TEST_DIR")

    assert expand_env_vars("$SYMLINKER_TEST_DIR/vimrc") == "/vimrc"


def test_expanded_value_containing_dollar_is_not_expanded_again():
    """A variable whose value holds '$' is substituted once and flagged by the heuristic."""
    expanded = expand_env_vars("$WEIRD/file", {"WEIRD": "/tmp/$HOME"})

    assert expanded == "/tmp/$HOME/file"
    assert has_unexpanded_variable(expanded)


def test_env_expander_expands_both_fields():
    raw = parse_line("$HOME/.zshrc $TOOLS_DIR/.zshrc", 1)

    entry = EnvExpander(ENVIRON).expand(raw)

    assert entry.link_path == "/home/u/.zshrc"
    assert entry.target_path == "/opt/tools/.zshrc"
    assert entry.link_dir == "/home/u"
    assert entry.raw is raw
    assert entry.line_number == 1


def test_link_dir_of_bare_file_name_is_current_directory():
    raw = parse_line("zshrc /opt/tools/zshrc", 1)

    assert EnvExpander({}).expand(raw).link_dir == "."


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a${}b", "ab"),
        ("${HOME", "HOME"),
        ("$1x", "onex"),
        ("${1}x", "onex"),
        ("${weird{name}", "braced"),
        ("$?/status", "/status"),
    ],
)
def test_malformed_and_special_references_follow_shell_rules(raw: str, expected: str):
    """Empty or unterminated braces are consumed, and a digit after "$" is a one-character name."""
    environ = dict(ENVIRON, **{"1": "one", "weird{name": "braced"})

    assert expand_env_vars(raw, environ) == expected


def test_link_dir_ignores_trailing_slash():
    raw = parse_line("$HOME/.config/nvim/ /opt/tools/nvim", 1)

    assert EnvExpander(ENVIRON).expand(raw).link_dir == "/home/u/.config"
