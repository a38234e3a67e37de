class ParserError(Exception):
    """Base class for failures of the tree-sitter layer."""


class GrammarInitError(ParserError):
    """The Java grammar could not be loaded."""


class ParseError(ParserError):
    """Source text could not be parsed into a tree."""
