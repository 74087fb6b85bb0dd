import pytest

from switchyard.exceptions import SwitchDefinitionError
from switchyard.parser import OptionParser, Switch, SwitchSet, SwitchType


def test_option_names():
    switch = Switch.option("--level", "-l", type="numeric")
    assert switch.canonical_name == "--level"
    assert switch.human_name == "level"
    assert switch.aliases == ("-l",)
    assert switch.type is SwitchType.NUMERIC
    assert switch.positional is False


def test_long_name_is_canonical_regardless_of_order():
    switch = Switch.option("-l", "--level", "-L")
    assert switch.canonical_name == "--level"
    assert switch.aliases == ("-l", "-L")


def test_short_only_option():
    switch = Switch.option("-q")
    assert switch.canonical_name == "-q"
    assert switch.human_name == "q"


def test_human_name_replaces_dashes():
    assert Switch.option("--dry-run").human_name == "dry_run"


@pytest.mark.parametrize(
    "default, expected",
    [
        (None, SwitchType.BOOLEAN),
        (True, SwitchType.BOOLEAN),
        (3, SwitchType.NUMERIC),
        (2.5, SwitchType.NUMERIC),
        ("x", SwitchType.STRING),
        (["a"], SwitchType.ARRAY),
        ({"a": "b"}, SwitchType.HASH),
    ],
)
def test_type_inferred_from_default(default, expected):
    assert Switch.option("--value", default=default).type is expected


@pytest.mark.parametrize(
    "names, kwargs",
    [
        ((), {}),
        (("level",), {}),
        (("-lv",), {}),
        (("--",), {}),
        (("--level",), {"type": "bogus"}),
        (("--level",), {"type": "numeric", "default": "x"}),
        (("--level",), {"type": "numeric", "default": True}),
        (("--level",), {"default": object()}),
    ],
)
def test_option_errors(names, kwargs):
    with pytest.raises(SwitchDefinitionError):
        Switch.option(*names, **kwargs)


def test_argument():
    argument = Switch.argument("path")
    assert argument.canonical_name == "--path"
    assert argument.human_name == "path"
    assert argument.positional is True
    assert argument.required is True
    assert argument.type is SwitchType.STRING
    assert argument.display_name == "path"


def test_argument_with_default_is_optional():
    argument = Switch.argument("mode", default="fast")
    assert argument.required is False
    assert argument.default == "fast"


@pytest.mark.parametrize(
    "name, kwargs",
    [
        ("-x", {}),
        ("", {}),
        ("2x", {}),
        ("a b", {}),
        ("flag", {"type": "boolean"}),
    ],
)
def test_argument_errors(name, kwargs):
    with pytest.raises(SwitchDefinitionError):
        Switch.argument(name, **kwargs)


@pytest.mark.parametrize(
    "switch, expected",
    [
        (Switch.option("--name", type="string"), True),
        (Switch.option("--level", type="numeric"), True),
        (Switch.option("--tags", type="array"), False),
        (Switch.option("--tags", type="array", required=True), True),
        (Switch.option("--attrs", type="hash", required=True), True),
        (Switch.option("--force", required=True), False),
        (Switch.option("--mode", type="default", required=True), False),
    ],
)
def test_input_required(switch, expected):
    assert switch.input_required is expected


def test_switch_str():
    assert (
        str(Switch.option("--level", type="numeric", required=True))
        == "Switch(switch='--level', type=numeric, required=True)"
    )
    assert (
        str(Switch.argument("path"))
        == "Switch(argument='path', type=string, required=True)"
    )


# --- SwitchType ---
@pytest.mark.parametrize(
    "value, expected",
    [
        ("numeric", SwitchType.NUMERIC),
        ("int", SwitchType.NUMERIC),
        ("float", SwitchType.NUMERIC),
        ("LIST", SwitchType.ARRAY),
        (" dict ", SwitchType.HASH),
        ("bool", SwitchType.BOOLEAN),
        ("str", SwitchType.STRING),
    ],
)
def test_switch_type_aliases(value, expected):
    assert SwitchType(value) is expected


def test_switch_type_invalid():
    with pytest.raises(ValueError, match="Must be one of"):
        SwitchType("nope")
    with pytest.raises(ValueError):
        SwitchType(3)


def test_switch_type_basics():
    assert str(SwitchType.HASH) == "hash"
    assert SwitchType("number") is SwitchType.NUMERIC


# --- SwitchSet ---
def test_switch_set_lookup():
    force = Switch.option("--force", "-f")
    switches = SwitchSet([force])
    assert switches.lookup("--force") is force
    assert switches.lookup("--no-force") is force
    assert switches.lookup("--skip-force") is force
    assert switches.lookup("-f") is None
    assert switches.normalize("-f") == "--force"
    assert switches.normalize("--other") == "--other"
    assert switches.is_known("-f")
    assert switches.is_negated("--no-force")
    assert not switches.is_negated("--force")
    assert "-f" in switches
    assert "--bogus" not in switches
    assert switches.get("force") is force
    assert switches.get("bogus") is None


def test_alias_colliding_with_canonical_is_dropped():
    switches = SwitchSet([Switch.option("--verbose", "-v"), Switch.option("-v")])
    assert "-v" not in switches.aliases
    assert switches.lookup("-v").human_name == "v"


def test_first_alias_wins():
    switches = SwitchSet(
        [Switch.option("--force", "-f"), Switch.option("--file", "-f", type="string")]
    )
    assert switches.aliases == {"-f": "--force"}


def test_switch_set_is_read_only():
    switches = SwitchSet([Switch.option("--force", "-f")])
    with pytest.raises(TypeError):
        switches.switches["--other"] = Switch.option("--other")
    with pytest.raises(TypeError):
        switches.aliases["-o"] = "--other"


@pytest.mark.parametrize(
    "declared",
    [
        [Switch.option("--dry-run"), Switch.option("--dry_run")],
        [Switch.option("--force"), Switch.option("--force", "-f")],
        [Switch.option("--path"), Switch.argument("path")],
        ["--force"],
    ],
)
def test_switch_set_errors(declared):
    with pytest.raises(SwitchDefinitionError):
        SwitchSet(declared)


def test_switch_set_order_and_str():
    switches = SwitchSet(
        [
            Switch.argument("source"),
            Switch.option("--level", "-l", type="numeric", required=True),
            Switch.argument("dest", default="."),
        ]
    )
    assert [switch.human_name for switch in switches.positional] == ["source", "dest"]
    assert [switch.human_name for switch in switches.required] == ["source", "level"]
    assert len(switches) == 3
    assert str(switches) == "SwitchSet(switches=3, aliases=1, positional=2, required=2)"


def test_switch_set_skip_arguments():
    switches = SwitchSet(
        [Switch.option("--force"), Switch.argument("path")], skip_arguments=True
    )
    assert len(switches) == 1
    assert switches.positional == ()
    assert switches.required == ()


def test_switch_set_lookup_ignores_dash_underscore_spelling():
    dry_run = Switch.option("--dry_run")
    switches = SwitchSet([dry_run])
    assert switches.get("dry_run") is dry_run
    assert switches.lookup("--dry-run") is dry_run
    assert switches.lookup("--dry_run") is dry_run
    assert switches.lookup("--no-dry-run") is dry_run
    assert switches.is_negated("--dry-run") is False
    assert switches.is_negated("--no-dry-run") is True


def test_switch_set_long_spelling_does_not_match_short_switch():
    switches = SwitchSet([Switch.option("-x")])
    assert switches.get("x") is not None
    assert switches.lookup("--x") is None


def test_underscore_switch_parses_dash_spelling():
    parser = OptionParser([Switch.option("--dry_run")])
    assert parser.parse(["--dry-run"]).options == {"dry_run": True}
    assert parser.parse(["--no-dry-run"]).options == {"dry_run": False}
