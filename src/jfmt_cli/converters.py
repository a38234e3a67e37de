from jfmt_linter.models import Config, IndentStyle, Issue

from .models import ConfigFile, LintIssue


def config_file_to_config(data: ConfigFile) -> Config:
    """Convert the validated Pydantic file model to the engine's dataclass"""
    return Config(
        indent_style=IndentStyle(data.indent_style),
        indent_width=data.indent_width,
        max_line_length=data.max_line_length,
    )


def issue_to_lint_issue(issue: Issue, file_path: str) -> LintIssue:
    """Convert an internal dataclass issue to an external Pydantic issue"""
    return LintIssue(
        file_path=file_path,
        line_number=issue.line,
        column=issue.column,
        rule_id=issue.rule_id,
        message=issue.message,
        auto_fixable=issue.auto_fixable,
    )
