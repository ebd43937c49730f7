"""Source ingestion for Ruby code-smell analysis: read, parse, attach comments, dress."""

from rubysmell.errors import ParseError, RubysmellError
from rubysmell.source import SourceCode

__version__ = "0.1.0"

__all__ = [
    "ParseError",
    "RubysmellError",
    "SourceCode",
    "__version__",
]
