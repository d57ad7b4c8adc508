"""Content Reader - turn a file into text the caller can display

Binary formats are never decoded: the caller gets a short descriptor with the
file name and its size instead. Read failures are returned as ``ReadError``
values rather than raised, and are rendered to text only at the outward
boundary.
"""
import os
from pathlib import Path
from typing import NamedTuple, Union

# .svg is XML and stays text
BINARY_EXTENSIONS = frozenset({
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp",
    ".mp3", ".wav", ".mp4", ".avi",
    ".zip", ".rar", ".7z", ".tar", ".gz",
})


class ReadOk(NamedTuple):
    text: str


class ReadError(NamedTuple):
    message: str


ReadResult = Union[ReadOk, ReadError]


def is_binary(path: Union[str, os.PathLike]) -> bool:
    return Path(path).suffix.lower() in BINARY_EXTENSIONS


def read_content(path: Union[str, os.PathLike]) -> ReadResult:
    """Read ``path`` as UTF-8 text, or describe it if it is a binary format"""
    path = Path(path)
    try:
        if is_binary(path):
            size = path.stat().st_size
            return ReadOk(f"[Binary file: {path.name}, size: {size} bytes]")

        # newline="" keeps \r\n intact so the text round-trips exactly
        with open(path, "r", encoding="utf-8", newline="") as f:
            return ReadOk(f.read())
    except (OSError, UnicodeDecodeError) as e:
        return ReadError(f"[Error reading file: {e}]")


def render(result: ReadResult) -> str:
    """Collapse a read result into the text placed in a response"""
    if isinstance(result, ReadError):
        return result.message
    return result.text
