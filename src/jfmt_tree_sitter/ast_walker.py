from typing import Iterator, Optional

from .node_types import SyntaxNode


class ASTWalker:
    """Utilities for traversing and searching the Java AST"""

    @staticmethod
    def iter_preorder(node: SyntaxNode) -> Iterator[SyntaxNode]:
        """Depth-first pre-order traversal, children left to right."""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            # Reversed so the leftmost child is popped first
            stack.extend(reversed(current.children))

    @staticmethod
    def iter_with_parent(node: SyntaxNode) -> Iterator[tuple[SyntaxNode, Optional[SyntaxNode]]]:
        """Pre-order traversal yielding (node, parent); the root has no parent."""
        stack: list[tuple[SyntaxNode, Optional[SyntaxNode]]] = [(node, None)]
        while stack:
            current, parent = stack.pop()
            yield current, parent
            stack.extend((child, current) for child in reversed(current.children))

    @staticmethod
    def get_text(node: SyntaxNode, source: bytes | str) -> str:
        """Source text spanned by a node. Byte offsets index the UTF-8 encoding."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
