from typing import Iterable

from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading linting rules.

    Registration order is the order issues are reported in.
    """

    def __init__(self, load_builtins: bool = True):
        self._rules: list[BaseRule] = []
        if load_builtins:
            self._load_builtin_rules()

    def register(self, rule: BaseRule):
        if any(r.rule_id == rule.rule_id for r in self._rules):
            raise ValueError(f"Rule '{rule.rule_id}' is already registered")
        self._rules.append(rule)

    def get_all_rules(self) -> list[BaseRule]:
        return list(self._rules)

    def get_enabled_rules(
        self,
        select: Iterable[str] | None = None,
        ignore: Iterable[str] | None = None,
    ) -> list[BaseRule]:
        """Rules whose id starts with a selected prefix and with no ignored prefix"""
        select = list(select or [])
        ignore = list(ignore or [])
        enabled = []
        for rule in self._rules:
            if select and not any(rule.rule_id.startswith(p) for p in select):
                continue
            if any(rule.rule_id.startswith(p) for p in ignore):
                continue
            enabled.append(rule)
        return enabled

    def _load_builtin_rules(self):
        from .rules.syntax_rules import NoEmptyStatementRule, NoWildcardImportsRule
        from .rules.text_rules import IndentStyleRule, MaxLineLengthRule

        self.register(NoWildcardImportsRule())
        self.register(NoEmptyStatementRule())
        self.register(MaxLineLengthRule())
        self.register(IndentStyleRule())
