# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token shapes recognized by the Switchyard parser.

A token is classified by peeking at it, never by consuming it. The shapes are
mutually exclusive and tested in this order:

1. CLUSTER        `-xyz`         several one-letter switches in one token
2. EQUALS         `--name=value` or `-x=value`
3. JOINED_NUMERIC `-l3`, `-l2.5` a short switch glued to a number
4. LONG           `--name`
5. SHORT          `-x`
6. VALUE          anything else, including a bare `-` and pre-typed values

`classify()` only reports the syntactic shape and the pieces it splits into.
Whether the switch piece is actually known is decided by the caller, which
owns the switch set.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

NUMERIC = r"(\d*\.\d+|\d+)"
NUMERIC_RE = re.compile(rf"^{NUMERIC}$")
LONG_RE = re.compile(r"^(--\w+[-\w]*)$")
SHORT_RE = re.compile(r"^(-[a-z])$", re.IGNORECASE)
EQ_RE = re.compile(r"^(--\w+[-\w]*|-[a-z])=(.*)$", re.IGNORECASE | re.DOTALL)
SHORT_SQ_RE = re.compile(r"^-([a-z]{2,})$", re.IGNORECASE)
SHORT_NUM_RE = re.compile(rf"^(-[a-z]){NUMERIC}$", re.IGNORECASE)
NEGATED_RE = re.compile(r"^--(no|skip)-([-\w]+)$")


class TokenShape(Enum):
    """Syntactic shape of a single token."""

    CLUSTER = "cluster"
    EQUALS = "equals"
    JOINED_NUMERIC = "joined_numeric"
    LONG = "long"
    SHORT = "short"
    VALUE = "value"

    @property
    def is_switch(self) -> bool:
        return self is not TokenShape.VALUE

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Classified:
    """
    Result of classifying one token.

    Attributes:
        shape (TokenShape): The shape the token matched.
        switch (str | None): The switch piece, e.g. `--name` for `--name=value`.
            None for clusters and plain values.
        pieces (tuple[str, ...]): Tokens to push back in front of the stream
            when the token is consumed: the value piece for EQUALS and
            JOINED_NUMERIC, the split `-x` tokens for CLUSTER.
    """

    shape: TokenShape
    switch: str | None = None
    pieces: tuple[str, ...] = ()


def is_value(token: Any) -> bool:
    """
    Return True if the token can be used as a value.

    Pre-typed tokens (numbers, mappings, sequences) are always values. A string
    is a value unless it starts with `-`; a bare `-` is a value.
    """
    if not isinstance(token, str):
        return True
    return token == "-" or not token.startswith("-")


def split_cluster(token: str) -> tuple[str, ...]:
    """Split `-xyz` into `("-x", "-y", "-z")`."""
    return tuple(f"-{letter}" for letter in token[1:])


def classify(token: Any) -> Classified:
    """
    Classify a token by shape.

    A CLUSTER is reported for any `-` followed by two or more letters; callers
    demote it to VALUE when none of its letters is a known switch.

    Args:
        token (Any): The token at the head of the stream.

    Returns:
        Classified: The shape and the pieces the token splits into.
    """
    if not isinstance(token, str):
        return Classified(TokenShape.VALUE)

    if SHORT_SQ_RE.match(token):
        return Classified(TokenShape.CLUSTER, pieces=split_cluster(token))

    match = EQ_RE.match(token)
    if match:
        return Classified(TokenShape.EQUALS, match.group(1), (match.group(2),))
    match = SHORT_NUM_RE.match(token)
    if match:
        return Classified(TokenShape.JOINED_NUMERIC, match.group(1), (match.group(2),))

    for pattern, shape in ((LONG_RE, TokenShape.LONG), (SHORT_RE, TokenShape.SHORT)):
        match = pattern.match(token)
        if match:
            return Classified(shape, match.group(1))
    return Classified(TokenShape.VALUE)


def is_numeric(value: str) -> bool:
    """Return True if the whole string is an integer or decimal literal."""
    return bool(NUMERIC_RE.fullmatch(value))
