from .ast_walker import ASTWalker
from .errors import GrammarInitError, ParseError, ParserError
from .node_types import ParseResult, SyntaxNode
from .parser import JavaParser

__all__ = [
    "ASTWalker",
    "GrammarInitError",
    "JavaParser",
    "ParseError",
    "ParseResult",
    "ParserError",
    "SyntaxNode",
]
