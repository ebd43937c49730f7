"""Source inputs and the SourceCode facade."""

from .input import (
    IO_IDENTIFIER,
    STRING_IDENTIFIER,
    FileSource,
    InputSource,
    PathSource,
    StreamSource,
    TextSource,
    classify,
)
from .source_code import SourceCode, TreeState

__all__ = [
    "FileSource",
    "IO_IDENTIFIER",
    "InputSource",
    "PathSource",
    "STRING_IDENTIFIER",
    "SourceCode",
    "StreamSource",
    "TextSource",
    "TreeState",
    "classify",
]
