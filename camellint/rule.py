"""The camelcase pass: checks every visited Identifier against the resolved options."""

from __future__ import annotations

from .config import RuleConfig, resolve_options
from .detectors.naming import checkable_name, is_exception
from .estree.context import should_report
from .state import ViolationSink
from .utils import debug


class CamelcaseRule:
    """One pass over one tree. Create a new instance (or call start_run) per run."""

    def __init__(self, config: RuleConfig):
        self.config = config
        self.sink = ViolationSink()

    @classmethod
    def initialize(cls, options: dict | None = None) -> CamelcaseRule:
        """Resolve raw options. Raises PatternCompileError on a bad pattern."""
        return cls(resolve_options(options))

    @property
    def violations(self) -> list[dict]:
        return self.sink.violations

    def start_run(self):
        self.sink.reset()

    def visit(self, node: dict):
        """Check one Identifier node; report it if it breaks the convention."""
        name = checkable_name(node.get("name", ""), self.config)
        if is_exception(name, self.config):
            return
        if should_report(node, name, self.config):
            if self.sink.report(node):
                debug(f"reported {node.get('name')!r}")


def lint(tree: dict, options: dict | None = None) -> list[dict]:
    """Run the camelcase pass over an ESTree tree and return its violations."""
    from .estree.walk import attach_parents, traverse

    rule = CamelcaseRule.initialize(options)
    attach_parents(tree)
    traverse(tree, rule.visit)
    debug(f"{len(rule.violations)} camelcase violation(s)")
    return rule.violations
