"""Run-scoped violation state: one record per offending syntax node."""

DETECTOR = "camelcase"
MESSAGE = "Identifier '{name}' is not in camel case."


def _position(node: dict) -> tuple[int | None, int | None]:
    start = (node.get("loc") or {}).get("start") or {}
    return start.get("line"), start.get("column")


def make_violation(node: dict) -> dict:
    """Create a violation dict for an Identifier node, keyed by position and name."""
    name = node.get("name", "")
    line, column = _position(node)
    where = f"{line}:{column}" if line is not None else "?"
    return {"id": f"{DETECTOR}::{where}::{name}", "detector": DETECTOR,
            "name": name, "message": MESSAGE.format(name=name),
            "line": line, "column": column, "node": node}


class ViolationSink:
    """Collects violations for a single run, ignoring repeat reports of a node.

    Node identity is object identity: a destructuring shorthand visited as
    both key and value is the same dict and is reported once.
    """

    def __init__(self):
        self._reported: set[int] = set()
        self.violations: list[dict] = []

    def reset(self):
        self._reported.clear()
        self.violations = []

    def report(self, node: dict) -> bool:
        """Record a violation for node. Returns False if it was already reported."""
        key = id(node)
        if key in self._reported:
            return False
        self._reported.add(key)
        self.violations.append(make_violation(node))
        return True
