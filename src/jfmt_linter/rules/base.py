from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterator

from jfmt_tree_sitter import ASTWalker, SyntaxNode

from ..models import Config, Edit, Issue


@dataclass
class LintContext:
    """Inputs shared by every rule during one lint pass."""

    source: str
    root: SyntaxNode
    config: Config = field(default_factory=Config)

    @cached_property
    def source_bytes(self) -> bytes:
        return self.source.encode("utf-8")


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'no-empty-statement')."""
        pass

    @property
    def name(self) -> str:
        """Human-readable rule name."""
        return self.rule_id.replace("-", " ")

    @property
    def auto_fixable(self) -> bool:
        """Can this rule automatically fix violations?"""
        return False

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check(self, context: LintContext) -> list[Issue]:
        """Run the check and return found issues."""
        pass

    # Helper method for consistent issue creation
    def _create_issue(
        self,
        line: int,
        column: int,
        message: str,
        fix: Edit | None = None,
    ) -> Issue:
        return Issue(rule_id=self.rule_id, message=message, line=line, column=column, fix=fix)


class ASTRule(BaseRule):
    """Rule evaluated on every node of a pre-order tree walk."""

    @abstractmethod
    def check_node(
        self, node: SyntaxNode, parent: SyntaxNode | None, context: LintContext
    ) -> Issue | None:
        pass

    def check(self, context: LintContext) -> list[Issue]:
        issues = []
        for node, parent in ASTWalker.iter_with_parent(context.root):
            issue = self.check_node(node, parent, context)
            if issue is not None:
                issues.append(issue)
        return issues

    def _issue_at(self, node: SyntaxNode, message: str, fix: Edit | None = None) -> Issue:
        row, column = node.start_point
        return self._create_issue(row + 1, column + 1, message, fix)


class TextRule(BaseRule):
    """Rule evaluated on the raw source, one line at a time."""

    @staticmethod
    def iter_lines(source: str) -> Iterator[tuple[int, int, str]]:
        """Yield (index, start_byte, line) for each line split on line feeds.

        A trailing unterminated line counts; the empty remainder after a final
        newline does not. The newline itself is not part of the line.
        """
        start_byte = 0
        for index, line in enumerate(_split_lf(source)):
            yield index, start_byte, line
            start_byte += len(line.encode("utf-8")) + 1


def _split_lf(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines
