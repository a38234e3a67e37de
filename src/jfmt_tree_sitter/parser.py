import logging

import tree_sitter_java as tsj
from tree_sitter import Language, Parser

from .ast_walker import ASTWalker
from .errors import GrammarInitError, ParseError
from .node_types import ParseResult

logger = logging.getLogger(__name__)


def load_java_language() -> Language:
    """Load the bundled tree-sitter Java grammar."""
    try:
        language = Language(tsj.language())
    except (TypeError, ValueError) as e:
        raise GrammarInitError(f"failed to initialize Java language: {e}") from e
    if language.node_kind_count == 0:
        raise GrammarInitError("failed to initialize Java language")
    return language


class JavaParser:
    """Thin wrapper around a tree-sitter parser configured for Java"""

    def __init__(self):
        self.language = load_java_language()
        try:
            self.parser = Parser(self.language)
        except (TypeError, ValueError) as e:
            raise GrammarInitError(f"failed to initialize Java language: {e}") from e

    def parse_string(self, source: str) -> ParseResult:
        tree = self.parser.parse(source.encode("utf-8"))
        if tree is None:
            raise ParseError("failed to parse source")

        errors = self._collect_errors(tree.root_node)
        if errors:
            logger.debug("Syntax errors at lines %s", ", ".join(errors))
        return ParseResult(tree=tree, source=source, errors=errors)

    def _collect_errors(self, root) -> list[str]:
        if not root.has_error:
            return []
        return [
            str(node.start_point[0] + 1)
            for node in ASTWalker.iter_preorder(root)
            if node.type == "ERROR" or node.is_missing
        ]
