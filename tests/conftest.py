from dataclasses import dataclass, field

import pytest
from jfmt_linter.models import Config
from jfmt_linter.rules.base import LintContext
from jfmt_tree_sitter import JavaParser


@dataclass
class FakeNode:
    """Hand-built stand-in for a tree-sitter node"""

    type: str
    start_byte: int = 0
    end_byte: int = 0
    start_point: tuple[int, int] = (0, 0)
    children: list["FakeNode"] = field(default_factory=list)


@pytest.fixture
def parser():
    return JavaParser()


@pytest.fixture
def text_context():
    """Context for text-only rules: an empty tree over the given source"""

    def make(source: str, **config) -> LintContext:
        return LintContext(source=source, root=FakeNode("program"), config=Config(**config))

    return make


@pytest.fixture
def parsed_context(parser):
    def make(source: str, **config) -> LintContext:
        result = parser.parse_string(source)
        return LintContext(source=source, root=result.tree.root_node, config=Config(**config))

    return make
