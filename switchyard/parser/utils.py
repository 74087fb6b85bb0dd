# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Formatting helpers for turning parsed options back into command-line text.

Functions:
- to_switches: Render an options mapping as a shell-ready switch string.
"""
import shlex
from typing import Any, Mapping


def to_switches(options: Mapping[str, Any]) -> str:
    """
    Render an options mapping as switch syntax, e.g. for a subprocess call.

    Rules per value:
    - `True` → `--name`
    - `None` / `False` → omitted
    - list or tuple → `--name` followed by each element
    - dict → `--name` followed by `key:value` pairs
    - anything else → `--name value`

    Underscores in keys become dashes and every value is shell-quoted, so
    `shlex.split()` gives back tokens an `OptionParser` understands. Quoting
    does not protect values that start with `-`: `{"name": "-x"}` renders as
    `--name -x` and `-x` is read back as a switch, not as the value.

    Args:
        options (Mapping[str, Any]): Values by human name.

    Returns:
        str: The switches joined by spaces.

    Example:
        to_switches({"force": True, "level": 3, "tags": ["a", "b c"]})
        # "--force --level 3 --tags a 'b c'"
    """
    parts = []
    for key, value in options.items():
        if value is None or value is False:
            continue
        switch = f"--{key.replace('_', '-')}"
        if value is True:
            parts.append(switch)
        elif isinstance(value, (list, tuple)):
            parts.append(" ".join([switch, *(shlex.quote(str(item)) for item in value)]))
        elif isinstance(value, dict):
            pairs = (shlex.quote(f"{k}:{v}") for k, v in value.items())
            parts.append(" ".join([switch, *pairs]))
        else:
            parts.append(f"{switch} {shlex.quote(str(value))}")
    return " ".join(parts)
