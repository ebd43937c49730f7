"""Error types raised at the rubysmell boundary."""

from __future__ import annotations


class RubysmellError(Exception):
    """Base class for errors raised by rubysmell."""


class ParseError(RubysmellError):
    """
    Source text could not be parsed.

    Raised by SourceCode.syntax_tree when the parser rejects the text. The
    parser's own exception is kept in original_exception and chained as
    __cause__. Batch drivers are expected to catch this, warn with the origin
    and carry on with the next source.
    """

    TEMPLATE = "Source '{origin}' cannot be processed due to a syntax error: {detail}"

    def __init__(self, origin: str, original_exception: BaseException) -> None:
        self.origin = origin
        self.original_exception = original_exception
        super().__init__(
            self.TEMPLATE.format(origin=origin, detail=_detail(original_exception))
        )


def _detail(exc: BaseException) -> str:
    # SyntaxError.__str__ appends "(file, line N)"; the origin is already in our message.
    if isinstance(exc, SyntaxError) and exc.msg:
        return exc.msg
    return str(exc) or type(exc).__name__
