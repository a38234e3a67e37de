from jfmt_tree_sitter.errors import GrammarInitError, ParseError, ParserError

__all__ = ["ConfigError", "GrammarInitError", "LintError", "ParseError", "ParserError"]


class LintError(Exception):
    """A file could not be read or written back during a lint run."""


class ConfigError(Exception):
    """Configuration file is unreadable or invalid."""
