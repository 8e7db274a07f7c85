"""Identifier naming: checkable names and the camelCase verdict."""

from __future__ import annotations

import re

from ..config import RuleConfig
from .affixes import any_matches, strip_first_prefix, strip_first_suffix

_EDGE_UNDERSCORES = re.compile(r"^_+|_+$")


def is_style_violating(name: str) -> bool:
    """True if name has an underscore and is not an ALL_CAPS constant."""
    return "_" in name and name != name.upper()


def checkable_name(raw_name: str, config: RuleConfig) -> str:
    """Return the part of an identifier that the style check applies to.

    Leading/trailing underscores mark private or protected names and are
    dropped first, then at most one allowed prefix and one allowed suffix.
    """
    name = _EDGE_UNDERSCORES.sub("", raw_name)
    if config.allowed_prefixes:
        name = strip_first_prefix(name, config.allowed_prefixes)
    if config.allowed_suffixes:
        name = strip_first_suffix(name, config.allowed_suffixes)
    return name


def is_exception(name: str, config: RuleConfig) -> bool:
    return any_matches(name, config.exceptions)
