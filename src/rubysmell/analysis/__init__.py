"""Parsing and comment association for Ruby source."""

from .comments import Comment, CommentAssociator, CommentMap, associate
from .parser import DEFAULT_GRAMMAR, SourceParser, get_parser, supported_grammars, supports_grammar
from .ruby_parser import RubyParser, RubySyntaxError

__all__ = [
    "Comment",
    "CommentAssociator",
    "CommentMap",
    "DEFAULT_GRAMMAR",
    "RubyParser",
    "RubySyntaxError",
    "SourceParser",
    "associate",
    "get_parser",
    "supported_grammars",
    "supports_grammar",
]
