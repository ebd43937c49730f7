"""Input shapes rubysmell reads source from, and how each resolves to (text, origin)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Tuple, Union

IO_IDENTIFIER = "STDIN"
STRING_IDENTIFIER = "string"


def _decode(data: Union[str, bytes], encoding: str) -> str:
    if isinstance(data, bytes):
        return data.decode(encoding)
    return data


@dataclass(frozen=True)
class FileSource:
    """An open file; origin is the file's name."""

    handle: IO[Any]

    def read(self, encoding: str = "utf-8") -> Tuple[str, str]:
        return _decode(self.handle.read(), encoding), os.fspath(self.handle.name)


@dataclass(frozen=True)
class StreamSource:
    """A readable stream such as stdin."""

    handle: IO[Any]

    def read(self, encoding: str = "utf-8") -> Tuple[str, str]:
        lines = [_decode(line, encoding) for line in self.handle.readlines()]
        return "".join(lines), IO_IDENTIFIER


@dataclass(frozen=True)
class PathSource:
    path: Path

    def read(self, encoding: str = "utf-8") -> Tuple[str, str]:
        return Path(self.path).read_text(encoding=encoding), str(self.path)


@dataclass(frozen=True)
class TextSource:
    text: str

    def read(self, encoding: str = "utf-8") -> Tuple[str, str]:
        return self.text, STRING_IDENTIFIER


InputSource = Union[FileSource, StreamSource, PathSource, TextSource]

_VARIANTS = (FileSource, StreamSource, PathSource, TextSource)


def _is_named_file(handle: Any) -> bool:
    # sys.stdin and friends report pseudo names like "<stdin>"; fd-opened files report an int.
    name = getattr(handle, "name", None)
    if not hasattr(handle, "read") or not isinstance(name, (str, os.PathLike)):
        return False
    return not os.fspath(name).startswith("<")


def classify(source: Any) -> InputSource:
    """
    Wrap a raw input in its InputSource variant.

    Accepts an InputSource (returned as is), a str of source text, a path
    (os.PathLike), an open file, or any object with readlines() such as
    sys.stdin or io.StringIO.

    Raises:
        TypeError: If source is none of these.
    """
    if isinstance(source, _VARIANTS):
        return source
    if isinstance(source, str):
        return TextSource(source)
    if isinstance(source, os.PathLike):
        return PathSource(Path(source))
    if _is_named_file(source):
        return FileSource(source)
    if hasattr(source, "readlines"):
        return StreamSource(source)
    raise TypeError(f"Cannot read source code from {type(source).__name__!r}")
