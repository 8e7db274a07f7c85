"""ESTree traversal: parent links and pre-order Identifier dispatch.

Trees are plain dicts as emitted by ESTree parsers in JSON form (acorn,
espree, esprima). Each node has a "type"; children are dict or list values.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

_SKIP_KEYS = {"parent", "loc", "range"}


def _is_node(value) -> bool:
    return isinstance(value, dict) and "type" in value


def iter_children(node: dict) -> Iterator[dict]:
    """Yield child nodes in source-key order."""
    for key, value in node.items():
        if key in _SKIP_KEYS:
            continue
        if _is_node(value):
            yield value
        elif isinstance(value, list):
            yield from (v for v in value if _is_node(v))


def _share_shorthand(prop: dict):
    """Make `{a}` use one Identifier for key and value, as parsers do in memory."""
    key, value = prop.get("key"), prop.get("value")
    if (prop.get("shorthand") and key is not value
            and _is_node(key) and key["type"] == "Identifier"
            and _is_node(value) and value["type"] == "Identifier"
            and key.get("name") == value.get("name")):
        prop["value"] = key


def attach_parents(root: dict):
    """Set `parent` on every node below root. The root's parent is None."""
    root.setdefault("parent", None)
    stack = [root]
    while stack:
        node = stack.pop()
        if node["type"] == "Property":
            _share_shorthand(node)
        for child in iter_children(node):
            child["parent"] = node
            stack.append(child)


def traverse(root: dict, visit_identifier: Callable[[dict], None]):
    """Pre-order walk calling visit_identifier for every Identifier.

    A node reachable through two keys (shorthand properties) is visited twice.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node["type"] == "Identifier":
            visit_identifier(node)
        stack.extend(reversed(list(iter_children(node))))
