import logging
from pathlib import Path
from typing import Optional

import typer
from jfmt_linter.engine import LinterEngine
from jfmt_linter.errors import ConfigError, LintError
from jfmt_linter.registry import RuleRegistry
from jfmt_tree_sitter.errors import ParserError

from .config import load_config, load_config_file
from .converters import issue_to_lint_issue

logger = logging.getLogger(__name__)

app = typer.Typer(help="jfmt - Lint and autofix Java style issues")


def _report(issues, display_path: str):
    for issue in issues:
        typer.echo(issue_to_lint_issue(issue, display_path).format())


def lint_file(engine: LinterEngine, file_path: Path, fix: bool) -> int:
    """Lint (and optionally fix) one file; return the number of issues reported"""
    display_path = str(file_path)
    try:
        source = file_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LintError(f"failed to read {display_path}: {e}") from e

    if not fix:
        issues = engine.lint(source)
        _report(issues, display_path)
        return len(issues)

    fixed, issues = engine.fix(source)
    if fixed != source:
        try:
            file_path.write_text(fixed, encoding="utf-8", newline="")
        except OSError as e:
            raise LintError(f"failed to write {display_path}: {e}") from e
        typer.echo(f"applied fixes: {display_path}", err=True)
        # Re-lint the fixed content to show remaining issues only
        issues = engine.lint(fixed)
    _report(issues, display_path)
    return len(issues)


@app.command()
def main(
    files: list[Path] = typer.Argument(..., help="Java files to lint"),
    fix: bool = typer.Option(False, "--fix", help="Apply safe fixes in place"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="Config file (default: nearest jfmt.toml)"
    ),
    select: list[str] = typer.Option([], "--select", help="Only run rules with this id prefix"),
    ignore: list[str] = typer.Option([], "--ignore", help="Skip rules with this id prefix"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run the linter on Java files"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    try:
        config = load_config_file(config_file) if config_file else load_config()
    except ConfigError as e:
        typer.echo(f"error loading config: {e}", err=True)
        raise typer.Exit(code=2)

    rules = RuleRegistry().get_enabled_rules(select=select, ignore=ignore)
    try:
        engine = LinterEngine(config=config, rules=rules)
    except ParserError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2)

    total_issues = 0
    for file_path in files:
        if file_path.suffix != ".java":
            typer.echo(f"Skipping non-Java file: {file_path}", err=True)
            continue
        try:
            total_issues += lint_file(engine, file_path, fix)
        except (LintError, ParserError) as e:
            typer.echo(f"{file_path}: error: {e}", err=True)
            total_issues += 1  # count as failure

    logger.debug("Total issues: %d", total_issues)
    if total_issues > 0:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
