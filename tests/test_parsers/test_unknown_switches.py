import pytest

from switchyard.config import ParserConfig, UnknownSwitchPolicy
from switchyard.parser import OptionParser, Switch


def build_parser(policy=None, *extra):
    config = ParserConfig(unknown_switches=policy) if policy else None
    return OptionParser([Switch.option("--force", "-f"), *extra], config)


def test_passthrough_is_the_default():
    assert build_parser().config.unknown_switches is UnknownSwitchPolicy.PASSTHROUGH


def test_passthrough_routes_to_trailing():
    result = build_parser().parse(["--bogus", "x", "-f"])
    assert result.trailing == ["--bogus", "x"]
    assert result.options == {"force": True}


def test_passthrough_fills_positional():
    result = build_parser(None, Switch.argument("path")).parse(["--bogus"])
    assert result.arguments == ["--bogus"]


@pytest.mark.parametrize("policy", ["trailing", UnknownSwitchPolicy.TRAILING, "TRAILING"])
def test_trailing(policy):
    result = build_parser(policy, Switch.argument("path")).parse(["--bogus", "x"])
    assert result.trailing == ["--bogus"]
    assert result.arguments == ["x"]


def test_trailing_keeps_joined_tokens_whole():
    result = build_parser("trailing").parse(["--bogus=1", "-q5"])
    assert result.trailing == ["--bogus=1", "-q5"]


def test_drop():
    result = build_parser("drop", Switch.argument("path")).parse(["--bogus", "x", "-q"])
    assert result.arguments == ["x"]
    assert result.trailing == []
    assert result.options == {"path": "x", "force": False}


def test_unknown_switch_does_not_consume_value():
    result = build_parser("drop").parse(["--bogus", "value"])
    assert result.trailing == ["value"]
