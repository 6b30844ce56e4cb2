"""Tests for CLI help and version output."""

from click.testing import CliRunner
from unjumble.cli import cli
from unjumble.version import __version__


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert 'unjumble' in result.output.lower()
    assert __version__ in result.output


def test_help_lists_options():
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "LETTERS [DICTIONARY]" in result.output
    for option in ["-alpha", "-len", "-longest", "-include", "--verbose"]:
        assert option in result.output
    assert "Examples:" in result.output
    assert "unjumble -alpha -include e listen words.txt" in result.output


def test_help_mentions_default_dictionary():
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])
    assert "/usr/share/dict/words" in result.output
