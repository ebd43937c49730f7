"""SourceCode: one unit of Ruby source and its lazily built syntax tree."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from rubysmell.analysis.comments import associate
from rubysmell.analysis.parser import DEFAULT_GRAMMAR, SourceParser, get_parser
from rubysmell.ast import Node, TreeDresser
from rubysmell.config import default_config, parser_grammar, source_encoding
from rubysmell.errors import ParseError

from .input import classify

logger = logging.getLogger(__name__)


class TreeState(Enum):
    """Lifecycle of the cached syntax tree."""

    UNINITIALIZED = "uninitialized"
    PARSING = "parsing"
    CACHED = "cached"


class SourceCode:
    """
    A chunk of Ruby source code.

    Source can come from a file or path (analysing a project directory), from
    a stream (``echo "class Foo; end" | ...``) or from a string (test helpers).
    Use from_source() to build one from any of these.

    The syntax tree is built on first access to syntax_tree and cached. A
    parse failure raises ParseError and is not cached: the next access parses
    again.
    """

    def __init__(self, code: str, origin: str, parser: Optional[SourceParser] = None) -> None:
        """
        Args:
            code: Ruby source text.
            origin: 'STDIN', 'string' or a file path.
            parser: Parser used to build the tree; defaults to the Ruby grammar.
        """
        self._code = code
        self._origin = origin
        self._parser = parser if parser is not None else get_parser(DEFAULT_GRAMMAR)
        self._state = TreeState.UNINITIALIZED
        self._syntax_tree: Optional[Node] = None

    def __repr__(self) -> str:
        return f"SourceCode(origin={self._origin!r}, state={self._state.value})"

    @classmethod
    def from_source(
        cls,
        source: Any,
        parser: Optional[SourceParser] = None,
        config: Optional[dict[str, Any]] = None,
    ) -> "SourceCode":
        """
        Build a SourceCode from a file, stream, path or string.

        The input is read completely here. config supplies the grammar and
        the encoding for files and byte streams (defaults when omitted).

        Raises:
            TypeError: If source is not one of the accepted input shapes.
            OSError, UnicodeDecodeError: Reading the input failed.
        """
        if config is None:
            config = default_config()
        code, origin = classify(source).read(source_encoding(config))
        if parser is None:
            parser = get_parser(parser_grammar(config))
        return cls(code=code, origin=origin, parser=parser)

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def code(self) -> str:
        return self._code

    @property
    def parser(self) -> SourceParser:
        return self._parser

    @property
    def tree_state(self) -> TreeState:
        return self._state

    @property
    def syntax_tree(self) -> Optional[Node]:
        """
        The dressed syntax tree, built once per instance.

        Given this source::

            # comment about C
            class C
              def m
                puts 'nada'
              end
            end

        the tree is a ``program`` node holding a ClassNode for ``C`` (with
        the comment attached) whose body holds a MethodNode for ``m``.
        None is returned (and cached) when the source holds no code.

        Raises:
            ParseError: If the source does not parse.
            RuntimeError: If accessed again while the tree is being built.
        """
        if self._state is TreeState.CACHED:
            return self._syntax_tree
        if self._state is TreeState.PARSING:
            raise RuntimeError(f"Syntax tree for {self._origin} requested while it is being built")

        self._state = TreeState.PARSING
        try:
            self._syntax_tree = self._build_syntax_tree()
            self._state = TreeState.CACHED
        finally:
            if self._state is not TreeState.CACHED:
                self._state = TreeState.UNINITIALIZED
        return self._syntax_tree

    def _build_syntax_tree(self) -> Optional[Node]:
        logger.debug("Parsing %s", self._origin)
        try:
            ast, comments = self._parser.parse_with_comments(self._code, self._origin)
        except SyntaxError as error:
            logger.debug("Syntax error in %s: %s", self._origin, error)
            raise ParseError(origin=self._origin, original_exception=error) from error

        comment_map = associate(ast, comments) if ast is not None else None
        return TreeDresser().dress(ast, comment_map)
