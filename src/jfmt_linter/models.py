from dataclasses import dataclass
from enum import Enum


class IndentStyle(str, Enum):
    TABS = "tabs"
    SPACES = "spaces"


@dataclass(frozen=True)
class Config:
    """Style parameters consumed by the text rules"""

    indent_style: IndentStyle = IndentStyle.SPACES
    indent_width: int = 4  # used when expanding or collapsing tabs
    max_line_length: int = 100

    def __post_init__(self):
        if self.indent_width <= 0:
            raise ValueError(f"indent_width must be positive, got {self.indent_width}")
        if self.max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive, got {self.max_line_length}")


@dataclass(frozen=True)
class Edit:
    """Replace the half-open byte range [start_byte, end_byte) of the original source"""

    start_byte: int
    end_byte: int
    replacement: str

    def __post_init__(self):
        if self.start_byte < 0 or self.end_byte < self.start_byte:
            raise ValueError(f"invalid edit range [{self.start_byte}, {self.end_byte})")


@dataclass(frozen=True)
class Issue:
    """A single diagnostic. line and column are 1-based."""

    rule_id: str
    message: str
    line: int
    column: int
    fix: Edit | None = None

    @property
    def auto_fixable(self) -> bool:
        return self.fix is not None
