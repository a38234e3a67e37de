from .base import ASTRule, BaseRule, LintContext, TextRule
from .syntax_rules import NoEmptyStatementRule, NoWildcardImportsRule
from .text_rules import IndentStyleRule, MaxLineLengthRule

__all__ = [
    "ASTRule",
    "BaseRule",
    "IndentStyleRule",
    "LintContext",
    "MaxLineLengthRule",
    "NoEmptyStatementRule",
    "NoWildcardImportsRule",
    "TextRule",
]
