"""Rule options: resolve raw option dicts into an immutable RuleConfig.

Raw options follow the shape used in lint config files:

    {
        "properties": "always" | "never",      # or "propertyPolicy"
        "allowedPrefixes": ["opt_", {"pattern": "pfx\\d+_"}],
        "allowedSuffixes": ["_ms", {"regex": {"pattern": "_[kMG]?Hz"}}],
        "exceptions": ["var_args", {"pattern": "ignore_", "flags": "i"}],
    }

Strings are literal matchers; pattern descriptors are compiled once here so
that a bad pattern fails before any identifier is checked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .utils import debug


class ConfigError(ValueError):
    """Raised when rule options cannot be resolved."""


class PatternCompileError(ConfigError):
    """An affix or exception pattern is not a usable regular expression."""

    def __init__(self, option: str, pattern, reason: str):
        self.option = option
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"{option}: invalid pattern {pattern!r} ({reason})")


class PropertyPolicy(Enum):
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True)
class Matcher:
    """A literal string or a compiled pattern. Exactly one of the two is set."""
    literal: str | None = None
    pattern: re.Pattern | None = None

    @classmethod
    def of_literal(cls, text: str) -> Matcher:
        return cls(literal=text)

    @classmethod
    def of_pattern(cls, compiled: re.Pattern) -> Matcher:
        return cls(pattern=compiled)

    @property
    def is_pattern(self) -> bool:
        return self.pattern is not None

    def __repr__(self) -> str:
        if self.is_pattern:
            return f"Matcher(pattern={self.pattern.pattern!r})"
        return f"Matcher(literal={self.literal!r})"


@dataclass(frozen=True)
class RuleConfig:
    """Resolved options for one run. `None` means the list was not given."""
    property_policy: PropertyPolicy = PropertyPolicy.ALWAYS
    allowed_prefixes: tuple[Matcher, ...] | None = None
    allowed_suffixes: tuple[Matcher, ...] | None = None
    exceptions: tuple[Matcher, ...] | None = None


# JS RegExp flag -> re flag. g/y only affect stateful matching and u is the
# default for Python str patterns, so they carry no meaning here.
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "g": 0,
    "y": 0,
}

_POLICY_KEYS = ("propertyPolicy", "properties")
_LIST_KEYS = {
    "allowedPrefixes": "allowed_prefixes",
    "allowedSuffixes": "allowed_suffixes",
    "exceptions": "exceptions",
}


def _compile_flags(option: str, pattern: str, flags: str) -> int:
    value = 0
    for flag in flags:
        if flag not in _FLAG_MAP:
            raise PatternCompileError(option, pattern, f"unsupported flag {flag!r}")
        value |= _FLAG_MAP[flag]
    return value


def _pattern_descriptor(elt: dict) -> tuple[object, object]:
    """Return (pattern, flags) from {"pattern"...} or legacy {"regex": {...}}."""
    spec = elt.get("regex", elt)
    if not isinstance(spec, dict):
        return None, None
    return spec.get("pattern"), spec.get("flags", "")


def compile_matcher(option: str, elt) -> Matcher:
    """Build one Matcher from a string or a pattern descriptor."""
    if isinstance(elt, str):
        return Matcher.of_literal(elt)
    if not isinstance(elt, dict):
        raise PatternCompileError(option, elt, "expected a string or a pattern object")

    pattern, flags = _pattern_descriptor(elt)
    if not isinstance(pattern, str):
        raise PatternCompileError(option, pattern, "pattern must be a string")
    if flags is None:
        flags = ""
    if not isinstance(flags, str):
        raise PatternCompileError(option, pattern, "flags must be a string")
    try:
        compiled = re.compile(pattern, _compile_flags(option, pattern, flags))
    except re.error as exc:
        raise PatternCompileError(option, pattern, str(exc)) from exc
    return Matcher.of_pattern(compiled)


def compile_matchers(option: str, values) -> tuple[Matcher, ...] | None:
    """Compile an option list, preserving order. Non-lists resolve to None."""
    if not isinstance(values, (list, tuple)):
        return None
    return tuple(compile_matcher(option, elt) for elt in values)


def _resolve_policy(options: dict) -> PropertyPolicy:
    raw = None
    for key in _POLICY_KEYS:
        if key in options:
            raw = options[key]
            break
    if raw is None:
        return PropertyPolicy.ALWAYS
    for policy in PropertyPolicy:
        if raw == policy.value:
            return policy
    debug(f"property policy {raw!r} is not 'always'/'never', using 'always'")
    return PropertyPolicy.ALWAYS


def resolve_options(options: dict | None = None) -> RuleConfig:
    """Resolve raw rule options into a RuleConfig.

    Unknown property policies fall back to "always". Any pattern that does
    not compile raises PatternCompileError.
    """
    options = options or {}
    lists = {attr: compile_matchers(key, options.get(key))
             for key, attr in _LIST_KEYS.items()}
    return RuleConfig(property_policy=_resolve_policy(options), **lists)
