import logging
from typing import Sequence

from jfmt_tree_sitter import SyntaxNode
from jfmt_tree_sitter.parser import JavaParser

from .autofix import AutoFixEngine
from .models import Config, Issue
from .registry import RuleRegistry
from .rules.base import BaseRule, LintContext

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for Java linting.

    Holds a parser and the ordered rule list; every call is otherwise a pure
    function of its arguments.
    """

    def __init__(
        self,
        config: Config | None = None,
        rules: Sequence[BaseRule] | None = None,
        parser: JavaParser | None = None,
    ):
        self.config = config or Config()
        self.rules = list(rules) if rules is not None else RuleRegistry().get_all_rules()
        self.parser = parser or JavaParser()
        self.autofix = AutoFixEngine()

    def lint_tree(self, source: str, root: SyntaxNode) -> list[Issue]:
        """Run every rule once over an already parsed tree.

        Issues are grouped by rule in registry order; within a rule they come
        in document order.
        """
        context = LintContext(source=source, root=root, config=self.config)
        issues: list[Issue] = []
        for rule in self.rules:
            found = rule.check(context)
            logger.debug("%s: %d issue(s)", rule.rule_id, len(found))
            issues.extend(found)
        return issues

    def lint(self, source: str) -> list[Issue]:
        result = self.parser.parse_string(source)
        return self.lint_tree(source, result.tree.root_node)

    def fix(self, source: str) -> tuple[str, list[Issue]]:
        """Apply every available fix.

        Returns the rewritten source and the issues found *before* fixing.
        Callers wanting the residual issues lint the new text when it differs.
        """
        issues = self.lint(source)
        fixed = self.autofix.apply(source, issues)
        return fixed, issues
