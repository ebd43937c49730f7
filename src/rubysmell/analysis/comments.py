"""Source comments and their association with syntax-tree nodes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from tree_sitter import Node

# Wrapper nodes never take leading comments; their first statement does.
_TRANSPARENT_TYPES = frozenset({"program", "body_statement"})

_MAGIC_COMMENT = re.compile(
    r"^#\s*(-\*-|frozen_string_literal|warn_indent|warn_past_scope|shareable_constant_value)"
)
_ENCODING_COMMENT = re.compile(r"[\s#](en)?coding\s*[:=]\s*([A-Za-z0-9_-]+)")

# Definitions own comments trailing their header line (name, parameters, superclass).
_DEFINITION_TYPES = frozenset({"class", "module", "method", "singleton_method"})


def _strip_cr(text: str) -> str:
    """Drop the carriage return a CRLF line ending leaves on a comment."""
    return text[:-1] if text.endswith("\r") else text


@dataclass(frozen=True)
class Comment:
    """A comment token and where it sits in the source."""

    text: str
    start_point: Tuple[int, int]
    end_point: Tuple[int, int]
    start_byte: int
    end_byte: int

    @property
    def line(self) -> int:
        """1-based line the comment starts on."""
        return self.start_point[0] + 1

    @classmethod
    def from_node(cls, node: Node) -> "Comment":
        return cls(
            text=_strip_cr((node.text or b"").decode("utf-8", errors="replace")),
            start_point=(node.start_point[0], node.start_point[1]),
            end_point=(node.end_point[0], node.end_point[1]),
            start_byte=node.start_byte,
            end_byte=node.end_byte,
        )


# Keyed by tree-sitter node id, which is unique within one tree.
CommentMap = Dict[int, List[Comment]]


class CommentAssociator:
    """
    Attach each comment to the node it documents.

    The tree is walked in source order. A pending comment that ends before a
    node starts is a leading comment of that node; comments left over inside
    a node after its children were visited belong to the node itself, as does
    a comment on the node's last line. Shebang, magic and encoding comments
    at the top of the file are skipped.
    """

    def __init__(self, ast: Node, comments: List[Comment]) -> None:
        self._ast = ast
        self._source = ast.text or b""
        self._offset = ast.start_byte
        self._comments = sorted(comments, key=lambda c: c.start_byte)
        self._index = 0
        self._map: CommentMap = {}

    def associate(self) -> CommentMap:
        self._index = 0
        self._map = {}
        self._skip_directives()
        self._visit(self._ast)
        return self._map

    @property
    def _current(self) -> Optional[Comment]:
        if self._index < len(self._comments):
            return self._comments[self._index]
        return None

    def _skip_directives(self) -> None:
        for matches in (
            lambda text: text.startswith("#!"),
            _MAGIC_COMMENT.search,
            _ENCODING_COMMENT.search,
        ):
            current = self._current
            if current is not None and matches(current.text):
                self._index += 1

    def _visit(self, node: Node) -> None:
        self._process_leading(node)
        for child in node.named_children:
            if child.type != "comment":
                self._visit(child)
        self._process_trailing(node)

    def _process_leading(self, node: Node) -> None:
        if node.type in _TRANSPARENT_TYPES:
            return
        while self._current is not None and self._current.end_byte <= node.start_byte:
            self._attach(node)

    def _process_trailing(self, node: Node) -> None:
        while self._current is not None and self._current.end_byte <= node.end_byte:
            self._attach(node)
        while self._current is not None and self._decorates(self._current, node):
            self._attach(self._owner(node))

    @staticmethod
    def _owner(node: Node) -> Node:
        """The definition whose header holds node, else node itself."""
        parent = node.parent
        if parent is None or parent.type not in _DEFINITION_TYPES:
            return node
        body = parent.child_by_field_name("body")
        if body is not None and body.id == node.id:
            return node
        return parent

    def _decorates(self, comment: Comment, node: Node) -> bool:
        """True for a comment trailing the node on its last line with only blanks between."""
        if comment.start_point[0] != node.end_point[0]:
            return False
        # The outermost node ending here takes it, e.g. the call rather than its argument list.
        parent = node.parent
        if (
            parent is not None
            and parent.type not in _TRANSPARENT_TYPES
            and parent.end_byte == node.end_byte
        ):
            return False
        gap = self._source[node.end_byte - self._offset : comment.start_byte - self._offset]
        return not gap.strip()

    def _attach(self, node: Node) -> None:
        self._map.setdefault(node.id, []).append(self._comments[self._index])
        self._index += 1


def associate(ast: Node, comments: List[Comment]) -> CommentMap:
    """Map node ids to the comments that document them."""
    return CommentAssociator(ast, comments).associate()
