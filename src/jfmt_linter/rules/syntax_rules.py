from jfmt_tree_sitter import ASTWalker, SyntaxNode

from ..models import Edit, Issue
from .base import ASTRule, LintContext

# Nodes whose direct ';' children stand in statement or member position
STATEMENT_CONTAINERS = frozenset(
    {
        "program",
        "block",
        "constructor_body",
        "class_body",
        "interface_body",
        "annotation_type_body",
        "switch_block_statement_group",
    }
)

# Statements whose body is their last child
TRAILING_BODY_STATEMENTS = frozenset(
    {
        "while_statement",
        "for_statement",
        "enhanced_for_statement",
        "labeled_statement",
    }
)


class NoWildcardImportsRule(ASTRule):
    @property
    def rule_id(self) -> str:
        return "no-wildcard-imports"

    @property
    def description(self) -> str:
        return "Flags on-demand imports such as 'import java.util.*;'."

    def check_node(
        self, node: SyntaxNode, parent: SyntaxNode | None, context: LintContext
    ) -> Issue | None:
        if node.type != "import_declaration":
            return None
        # Static on-demand imports ('import static a.B.*;') match as well
        if ".*" not in ASTWalker.get_text(node, context.source_bytes):
            return None
        return self._issue_at(node, "Avoid wildcard imports (use explicit classes)")


class NoEmptyStatementRule(ASTRule):
    @property
    def rule_id(self) -> str:
        return "no-empty-statement"

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return (
            "Flags stray ';' statements. Fixes delete them, except where the ';' is "
            "the body of an if, loop or labeled statement."
        )

    def check_node(
        self, node: SyntaxNode, parent: SyntaxNode | None, context: LintContext
    ) -> Issue | None:
        is_body = self._is_control_body(node, parent)
        if node.type != "empty_statement" and not (
            node.type == ";" and (is_body or self._in_container(parent))
        ):
            return None

        # Deleting a body ';' would make the next statement the body
        fix = None
        if not is_body:
            fix = Edit(start_byte=node.start_byte, end_byte=node.end_byte, replacement="")
        return self._issue_at(node, "Remove unnecessary empty statement", fix)

    @staticmethod
    def _in_container(parent: SyntaxNode | None) -> bool:
        # Grammar versions without an empty_statement node expose the bare ';'
        # token directly; terminators of other statements are never direct
        # children of a container.
        return parent is not None and parent.type in STATEMENT_CONTAINERS

    @staticmethod
    def _is_control_body(node: SyntaxNode, parent: SyntaxNode | None) -> bool:
        if parent is None:
            return False
        if parent.type == "if_statement":
            # Only the consequence and else branch can be a bare ';'
            return True
        if parent.type == "do_statement":
            # do <body> while (...) ;  the final ';' is the terminator
            return len(parent.children) > 1 and parent.children[1] == node
        if parent.type in TRAILING_BODY_STATEMENTS:
            return parent.children[-1] == node
        return False
