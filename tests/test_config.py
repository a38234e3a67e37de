import pytest
from jfmt_cli.config import find_config_path, load_config, load_config_file
from jfmt_cli.converters import config_file_to_config, issue_to_lint_issue
from jfmt_cli.models import ConfigFile
from jfmt_linter.errors import ConfigError
from jfmt_linter.models import Config, Edit, IndentStyle, Issue


def test_defaults_without_config_file(tmp_path):
    assert load_config(tmp_path) == Config()
    assert Config() == Config(IndentStyle.SPACES, 4, 100)


def test_config_found_in_parent_directory(tmp_path):
    (tmp_path / "jfmt.toml").write_text('indent_style = "tabs"\nindent_width = 2\n')
    nested = tmp_path / "src" / "main"
    nested.mkdir(parents=True)

    config = load_config(nested)
    assert config == Config(indent_style=IndentStyle.TABS, indent_width=2, max_line_length=100)


def test_nearest_config_wins(tmp_path):
    (tmp_path / "jfmt.toml").write_text("max_line_length = 80\n")
    nested = tmp_path / "module"
    nested.mkdir()
    (nested / "jfmt.toml").write_text("max_line_length = 120\n")

    assert find_config_path(nested) == (nested / "jfmt.toml").resolve()
    assert load_config(nested).max_line_length == 120


@pytest.mark.parametrize(
    "content",
    [
        "indent_style = [",
        'indent_style = "both"',
        "indent_width = 0",
        "max_line_length = -1",
        'max_line_length = "long"',
    ],
)
def test_invalid_config_is_an_error(tmp_path, content):
    (tmp_path / "jfmt.toml").write_text(content)
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unreadable_config_is_an_error(tmp_path):
    with pytest.raises(ConfigError):
        load_config_file(tmp_path / "missing.toml")


def test_config_rejects_non_positive_values():
    with pytest.raises(ValueError):
        Config(indent_width=0)
    with pytest.raises(ValueError):
        Config(max_line_length=0)


def test_config_file_conversion():
    config = config_file_to_config(ConfigFile(indent_style="tabs", max_line_length=90))
    assert config == Config(indent_style=IndentStyle.TABS, indent_width=4, max_line_length=90)


def test_issue_formatting():
    issue = Issue("no-empty-statement", "Remove unnecessary empty statement", 3, 19, Edit(5, 6, ""))
    lint_issue = issue_to_lint_issue(issue, "src/A.java")

    assert lint_issue.auto_fixable is True
    assert lint_issue.format() == "src/A.java:3:19: no-empty-statement: Remove unnecessary empty statement"
