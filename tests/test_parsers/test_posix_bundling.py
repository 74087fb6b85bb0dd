import pytest

from switchyard.exceptions import MalformedArgument, RequiredArgumentMissing
from switchyard.parser import OptionParser, Switch


def build_parser(*extra):
    return OptionParser(
        [
            Switch.option("--xray", "-x"),
            Switch.option("--yank", "-y"),
            Switch.option("--size", "-s", type="numeric"),
            *extra,
        ]
    )


def test_posix_bundling():
    """Test the bundling of short options in the POSIX style."""
    result = build_parser().parse(["-xy"])
    assert result.options == {"xray": True, "yank": True}


def test_bundle_with_unknown_letter_goes_to_trailing():
    result = build_parser().parse(["-xyz"])
    assert result.options == {"xray": True, "yank": True}
    assert result.trailing == ["-z"]


def test_bundle_with_unknown_letter_fills_positional():
    result = build_parser(Switch.argument("target")).parse(["-xyz"])
    assert result.options["xray"] is True
    assert result.options["yank"] is True
    assert result.arguments == ["-z"]
    assert result.options["target"] == "-z"


def test_bundle_without_known_letters_is_a_value():
    result = build_parser().parse(["-abc"])
    assert result.options == {"xray": False, "yank": False}
    assert result.trailing == ["-abc"]


def test_bundle_last_has_value():
    result = build_parser().parse(["-xs", "5"])
    assert result.options == {"xray": True, "yank": False, "size": 5}


def test_bundle_value_missing():
    with pytest.raises(RequiredArgumentMissing, match="'--size'"):
        build_parser().parse(["-xs"])


def test_bundle_switch_used_as_value():
    with pytest.raises(MalformedArgument, match="cannot pass switch '-x' as an argument"):
        build_parser().parse(["-sx"])


def test_bundle_expansion_comes_before_following_tokens():
    result = build_parser(Switch.option("--tags", "-t", type="array")).parse(
        ["-xt", "a", "b", "-y"]
    )
    assert result.options["tags"] == ["a", "b"]
    assert result.options["yank"] is True
