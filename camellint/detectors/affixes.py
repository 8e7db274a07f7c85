"""Affix matching: literal/pattern matches and single prefix/suffix stripping."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import Matcher


def matches(value: str, matcher: Matcher) -> bool:
    """Literal: exact equality. Pattern: a match anywhere in value."""
    if matcher.is_pattern:
        return matcher.pattern.search(value) is not None
    return value == matcher.literal


def strip_prefix(value: str, matcher: Matcher) -> str | None:
    """Return value without a leading match, or None if it does not start with one.

    A literal prefix must leave a non-empty remainder.
    """
    if matcher.is_pattern:
        m = matcher.pattern.search(value)
        if not m or m.start() != 0:
            return None
        return value[m.end():]

    prefix = matcher.literal
    if len(prefix) >= len(value) or not value.startswith(prefix):
        return None
    return value[len(prefix):]


def strip_suffix(value: str, matcher: Matcher) -> str | None:
    """Return value without a trailing match, or None if it does not end with one."""
    if matcher.is_pattern:
        m = matcher.pattern.search(value)
        if not m or m.end() != len(value):
            return None
        return value[:m.start()]

    suffix = matcher.literal
    ends = len(value) - len(suffix)
    if ends <= 0 or not value.endswith(suffix):
        return None
    return value[:ends]


def strip_first_prefix(value: str, matchers: Sequence[Matcher]) -> str:
    """Strip the first prefix (in declaration order) that applies."""
    for matcher in matchers:
        stripped = strip_prefix(value, matcher)
        if stripped is not None:
            return stripped
    return value


def strip_first_suffix(value: str, matchers: Sequence[Matcher]) -> str:
    for matcher in matchers:
        stripped = strip_suffix(value, matcher)
        if stripped is not None:
            return stripped
    return value


def any_matches(value: str, matchers: Sequence[Matcher] | None) -> bool:
    if not matchers:
        return False
    return any(matches(value, m) for m in matchers)
