"""Parser capability and the registry of available grammars."""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol, Tuple, runtime_checkable

from tree_sitter import Node

from .comments import Comment
from .ruby_parser import RubyParser

DEFAULT_GRAMMAR = "ruby"


@runtime_checkable
class SourceParser(Protocol):
    """Anything that can turn source text into a tree plus its comments."""

    def parse_with_comments(self, text: str, origin: str) -> Tuple[Optional[Node], List[Comment]]:
        """
        Return (root node or None, comments in source order).

        Raises SyntaxError (or a subclass) when the text is malformed.
        """
        ...


_GRAMMARS: dict[str, Callable[[], SourceParser]] = {
    "ruby": RubyParser,
}


def get_parser(grammar: str = DEFAULT_GRAMMAR) -> SourceParser:
    """
    Build a parser for the given grammar key.

    Raises:
        ValueError: If the grammar is not supported.
    """
    factory = _GRAMMARS.get(grammar)
    if factory is None:
        raise ValueError(f"No parser available for grammar: {grammar!r}")
    return factory()


def supports_grammar(grammar: str) -> bool:
    """Return True if the given grammar is supported."""
    return grammar in _GRAMMARS


def supported_grammars() -> List[str]:
    """Return list of supported grammar keys."""
    return list(_GRAMMARS.keys())
