"""Ruby parser using tree-sitter."""

from __future__ import annotations

from typing import List, Optional, Tuple

import tree_sitter_ruby as tsruby
from tree_sitter import Language, Node, Parser

from .comments import Comment


class RubySyntaxError(SyntaxError):
    """Ruby source contains a lexical or syntactic error."""

    def __init__(self, message: str, origin: str, line: int, column: int, text: str = "") -> None:
        super().__init__(message, (origin, line, column, text))
        self.origin = origin
        self.line = line
        self.column = column


def _first_problem(node: Node) -> Optional[Node]:
    """Depth-first search for the first ERROR or MISSING node."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_problem(child)
            if found is not None:
                return found
    return None


# Words Ruby never reads as a local variable or a bare method call.
_RESERVED_WORDS = frozenset(
    {
        "BEGIN", "END", "alias", "and", "begin", "break", "case", "class", "def",
        "do", "else", "elsif", "end", "ensure", "for", "if", "in", "module", "next",
        "not", "or", "redo", "rescue", "retry", "return", "then", "undef", "unless",
        "until", "when", "while",
    }
)

# (parent type, field) pairs where a reserved word is a legal method name: x.class, def end.
_METHOD_NAME_FIELDS = (
    ("call", "method"),
    ("method", "name"),
    ("singleton_method", "name"),
)


def _is_method_name(node: Node) -> bool:
    parent = node.parent
    if parent is None:
        return False
    for parent_type, field in _METHOD_NAME_FIELDS:
        if parent.type == parent_type:
            named = parent.child_by_field_name(field)
            if named is not None and named.id == node.id:
                return True
    return False


def _stray_keyword(node: Node) -> Optional[Node]:
    """
    Find a reserved word the grammar let through as an identifier.

    tree-sitter-ruby recovers from e.g. a surplus ``end`` by reading it as a
    plain identifier instead of flagging an error.
    """
    if node.type == "identifier":
        word = (node.text or b"").decode("utf-8", errors="replace")
        if word in _RESERVED_WORDS and not _is_method_name(node):
            return node
        return None
    for child in node.named_children:
        found = _stray_keyword(child)
        if found is not None:
            return found
    return None


def _collect_comments(node: Node, into: List[Comment]) -> None:
    for child in node.children:
        if child.type == "comment":
            into.append(Comment.from_node(child))
        elif child.child_count:
            _collect_comments(child, into)


def _has_code(root: Node) -> bool:
    return any(child.type != "comment" for child in root.named_children)


class RubyParser:
    """Parse Ruby source into a tree-sitter tree plus its comments."""

    grammar = "ruby"

    def __init__(self) -> None:
        self._language = Language(tsruby.language())
        self._parser = Parser(self._language)

    def parse_with_comments(self, text: str, origin: str) -> Tuple[Optional[Node], List[Comment]]:
        """
        Parse Ruby source text.

        Args:
            text: Complete source text.
            origin: Label used in error messages ('STDIN', 'string' or a path).

        Returns:
            Tuple of (root node, comments in source order). The root is None
            when the text holds no code (empty, blank or only comments).

        Raises:
            RubySyntaxError: If the text does not parse cleanly.
        """
        source_code = text.encode("utf-8")
        tree = self._parser.parse(source_code)
        root = tree.root_node
        problem = _first_problem(root) if root.has_error else _stray_keyword(root)
        if problem is not None or root.has_error:
            raise self._syntax_error(problem or root, source_code, origin)

        comments: List[Comment] = []
        _collect_comments(root, comments)
        if not _has_code(root):
            return None, comments
        return root, comments

    def _syntax_error(self, problem: Node, source_code: bytes, origin: str) -> RubySyntaxError:
        row, column = problem.start_point[0], problem.start_point[1]
        lines = source_code.decode("utf-8", errors="replace").splitlines()
        line_text = lines[row] if row < len(lines) else ""
        if problem.is_missing:
            message = f"missing {problem.type!r}"
        else:
            token = source_code[problem.start_byte : problem.end_byte].decode(
                "utf-8", errors="replace"
            )
            token = token.strip().splitlines()[0] if token.strip() else ""
            message = f"unexpected {token!r}" if token else "unexpected end of input"
        return RubySyntaxError(
            f"{message} at line {row + 1}, column {column + 1}",
            origin,
            row + 1,
            column + 1,
            line_text,
        )
