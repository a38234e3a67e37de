from ..models import Edit, IndentStyle, Issue
from .base import LintContext, TextRule


class MaxLineLengthRule(TextRule):
    @property
    def rule_id(self) -> str:
        return "max-line-length"

    @property
    def description(self) -> str:
        return "Flags lines longer than max_line_length characters."

    def check(self, context: LintContext) -> list[Issue]:
        limit = context.config.max_line_length
        issues = []
        for index, _, line in self.iter_lines(context.source):
            # Characters, not bytes; a CRLF terminator is not part of the line
            length = len(line.removesuffix("\r"))
            if length > limit:
                issues.append(
                    self._create_issue(
                        index + 1,
                        limit + 1,
                        f"Line exceeds {limit} characters (was {length})",
                    )
                )
        return issues


class IndentStyleRule(TextRule):
    @property
    def rule_id(self) -> str:
        return "indent-style"

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Enforces tabs or spaces for leading indentation."

    def check(self, context: LintContext) -> list[Issue]:
        style = context.config.indent_style
        width = context.config.indent_width
        issues = []

        for index, start_byte, line in self.iter_lines(context.source):
            content = line.rstrip()
            if not content:
                continue
            leading = content[: len(content) - len(content.lstrip(" \t"))]
            if not leading:
                continue

            if style == IndentStyle.TABS and " " in leading:
                issues.append(
                    self._create_issue(
                        index + 1, 1, "Use tabs for indentation", self._tabs_fix(leading, start_byte, width)
                    )
                )
            elif style == IndentStyle.SPACES and "\t" in leading:
                replacement = "".join(" " * width if c == "\t" else c for c in leading)
                fix = Edit(start_byte, start_byte + len(leading), replacement)
                issues.append(self._create_issue(index + 1, 1, "Use spaces for indentation", fix))

        return issues

    @staticmethod
    def _tabs_fix(leading: str, start_byte: int, width: int) -> Edit | None:
        # Mixed runs and partial indent levels are ambiguous
        if "\t" in leading or len(leading) % width != 0:
            return None
        return Edit(start_byte, start_byte + len(leading), "\t" * (len(leading) // width))
