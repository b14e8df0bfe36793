"""Tests for the CLI argument parser."""

import pytest

from tentacle.cli import create_parser


def test_release_arguments():
    args = create_parser().parse_args(
        ["release", "octocat/Hello-World", "v1.0.0", "--json"]
    )
    assert args.command == "release"
    assert args.repository == "octocat/Hello-World"
    assert args.tag == "v1.0.0"
    assert args.json is True
    assert args.server is None
    assert args.anonymous is False


def test_auth_options_are_exclusive(capsys):
    with pytest.raises(SystemExit):
        create_parser().parse_args(
            ["release", "o/r", "v1", "--token", "x", "--anonymous"]
        )
    assert "not allowed with" in capsys.readouterr().err


def test_token_requires_action():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["token"])


def test_command_required():
    with pytest.raises(SystemExit):
        create_parser().parse_args([])
