import logging
from typing import Iterable

from .models import Edit, Issue

logger = logging.getLogger(__name__)


def apply_edits(source: str, edits: Iterable[Edit]) -> str:
    """Compose edits against the original source in a single pass.

    Edits are applied in ascending start_byte order (ties keep input order).
    An edit that starts at or before the end of the previous one has its
    replacement appended right after the previous replacement; overlapping
    edits are concatenated, not rejected.
    """
    edits = sorted(edits, key=lambda e: e.start_byte)
    if not edits:
        return source

    data = source.encode("utf-8")
    result = []
    cursor = 0
    for edit in edits:
        if edit.start_byte > cursor:
            result.append(data[cursor : edit.start_byte])
        result.append(edit.replacement.encode("utf-8"))
        cursor = min(edit.end_byte, len(data))
    result.append(data[cursor:])
    return b"".join(result).decode("utf-8")


def find_conflicts(edits: Iterable[Edit]) -> list[tuple[Edit, Edit]]:
    """Pairs (earlier, later) in application order whose byte ranges overlap.

    Each later edit is paired with the already-seen edit reaching furthest
    right. Abutting edits do not conflict.
    """
    conflicts = []
    reach: Edit | None = None
    for edit in sorted(edits, key=lambda e: e.start_byte):
        if reach is not None and edit.start_byte < reach.end_byte:
            conflicts.append((reach, edit))
        if reach is None or edit.end_byte > reach.end_byte:
            reach = edit
    return conflicts


class AutoFixEngine:
    """Collects the fixes attached to issues and applies them to a source string"""

    @staticmethod
    def collect_edits(issues: Iterable[Issue]) -> list[Edit]:
        return [issue.fix for issue in issues if issue.fix is not None]

    def apply(self, source: str, issues: Iterable[Issue]) -> str:
        edits = self.collect_edits(issues)
        if not edits:
            return source

        for first, second in find_conflicts(edits):
            logger.warning(
                "Overlapping fixes at bytes [%d, %d) and [%d, %d); replacements will be concatenated",
                first.start_byte,
                first.end_byte,
                second.start_byte,
                second.end_byte,
            )

        logger.debug("Applying %d fixes", len(edits))
        return apply_edits(source, edits)
