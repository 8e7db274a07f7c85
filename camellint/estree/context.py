"""Syntax context of an identifier: which occurrences the camelCase check applies to.

Works on ESTree dicts whose `parent` links were set by the walker. Only the
parent and grandparent of an identifier are inspected.
"""

from __future__ import annotations

from enum import Enum

from ..config import PropertyPolicy, RuleConfig
from ..detectors.naming import is_style_violating


class Role(Enum):
    BARE = "bare"
    MEMBER_OBJECT = "member_object"
    MEMBER_PROPERTY = "member_property"
    OBJECT_KEY = "object_key"         # key or value of an object literal property
    PATTERN_KEY = "pattern_key"       # {external_name: local} in a destructuring pattern
    CALL_CALLEE = "call_callee"


_PROPERTY_ROLES = {Role.MEMBER_OBJECT, Role.MEMBER_PROPERTY,
                   Role.OBJECT_KEY, Role.PATTERN_KEY}


def _type(node: dict | None) -> str | None:
    return node.get("type") if node else None


def effective_parent(node: dict) -> dict | None:
    """The parent, or the grandparent when the parent is a member access."""
    parent = node.get("parent")
    if _type(parent) == "MemberExpression":
        return parent.get("parent")
    return parent


def classify(node: dict) -> Role:
    parent = node.get("parent")
    ptype = _type(parent)

    if ptype == "MemberExpression":
        obj = parent.get("object")
        if _type(obj) == "Identifier" and obj.get("name") == node.get("name"):
            return Role.MEMBER_OBJECT
        return Role.MEMBER_PROPERTY

    if ptype == "Property":
        grand = parent.get("parent")
        if (_type(grand) == "ObjectPattern" and parent.get("key") is node
                and parent.get("value") is not node):
            return Role.PATTERN_KEY
        return Role.OBJECT_KEY

    if _type(effective_parent(node)) == "CallExpression":
        return Role.CALL_CALLEE
    return Role.BARE


def _is_assignment_target(node: dict) -> bool:
    """Member property written to by an assignment, e.g. `obj.foo_bar = 1`.

    A plain member read on the right side (`x = a.b_c`) does not count unless
    the left side is a member access with the same property name.
    """
    assign = effective_parent(node)
    if _type(assign) != "AssignmentExpression":
        return False
    if _type(assign.get("right")) != "MemberExpression":
        return True
    left = assign.get("left")
    return (_type(left) == "MemberExpression"
            and (left.get("property") or {}).get("name") == node.get("name"))


def should_report(node: dict, name: str, config: RuleConfig) -> bool:
    """Apply the context rules to an identifier whose checkable name is `name`."""
    role = classify(node)
    if role in _PROPERTY_ROLES and config.property_policy is PropertyPolicy.NEVER:
        return False
    if role in (Role.PATTERN_KEY, Role.CALL_CALLEE):
        return False
    if not is_style_violating(name):
        return False
    if role is Role.MEMBER_PROPERTY:
        return _is_assignment_target(node)
    if role is Role.OBJECT_KEY:
        return _type(effective_parent(node)) != "CallExpression"
    return True
