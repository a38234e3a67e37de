from dataclasses import dataclass, field
from typing import List, Protocol, Sequence, Tuple

from tree_sitter import Tree


class SyntaxNode(Protocol):
    """Minimal node surface the lint rules rely on.

    tree-sitter nodes satisfy it as-is; tests can pass hand-built nodes.
    """

    @property
    def type(self) -> str: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def start_point(self) -> Tuple[int, int]: ...

    @property
    def children(self) -> Sequence["SyntaxNode"]: ...


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""
    tree: Tree
    source: str
    errors: List[str] = field(default_factory=list)
