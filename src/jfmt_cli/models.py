from typing import Literal

from pydantic import BaseModel, ConfigDict, PositiveInt


class ConfigFile(BaseModel):
    """Schema of jfmt.toml; every key is optional"""

    model_config = ConfigDict(frozen=True)

    indent_style: Literal["tabs", "spaces"] = "spaces"
    indent_width: PositiveInt = 4
    max_line_length: PositiveInt = 100


class LintIssue(BaseModel):
    file_path: str
    line_number: int
    column: int
    rule_id: str
    message: str
    auto_fixable: bool = False

    def format(self) -> str:
        return f"{self.file_path}:{self.line_number}:{self.column}: {self.rule_id}: {self.message}"
