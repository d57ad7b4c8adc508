"""Error taxonomy shared by the dispatcher, the resource catalog and the transports"""
from enum import Enum
from typing import NamedTuple, Optional


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    FILE_NOT_FOUND = "file_not_found"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    DIRECTORY_UNREADABLE = "directory_unreadable"
    UNKNOWN_TOOL = "unknown_tool"
    READ_FAILURE = "read_failure"


# JSON-RPC error codes per kind
ERROR_CODES = {
    ErrorKind.INVALID_ARGUMENT: -32602,
    ErrorKind.UNKNOWN_TOOL: -32602,
    ErrorKind.FILE_NOT_FOUND: -32002,
    ErrorKind.DIRECTORY_NOT_FOUND: -32002,
    ErrorKind.DIRECTORY_UNREADABLE: -32603,
    ErrorKind.READ_FAILURE: -32603,
}


class Failure(NamedTuple):
    """An expected failure, returned by internal checks instead of raised"""
    kind: ErrorKind
    message: str
    path: Optional[str] = None
    cause: Optional[str] = None


def invalid_argument(name: str) -> Failure:
    return Failure(ErrorKind.INVALID_ARGUMENT, f"参数无效 (invalid argument): {name} is required")


def malformed_request(detail: str) -> Failure:
    return Failure(ErrorKind.INVALID_ARGUMENT, f"参数无效 (invalid argument): {detail}")


def file_not_found(path) -> Failure:
    return Failure(ErrorKind.FILE_NOT_FOUND, f"文件不存在 (file not found): {path}", path=str(path))


def directory_not_found(path) -> Failure:
    return Failure(ErrorKind.DIRECTORY_NOT_FOUND, f"目录不存在 (directory not found): {path}", path=str(path))


def directory_unreadable(path, cause: Exception) -> Failure:
    return Failure(
        ErrorKind.DIRECTORY_UNREADABLE,
        f"无法读取目录 (cannot read directory): {path}: {cause}",
        path=str(path),
        cause=str(cause),
    )


def unknown_tool(name: str, available) -> Failure:
    return Failure(
        ErrorKind.UNKNOWN_TOOL,
        f"未知工具 (unknown tool): {name}. Available tools: {', '.join(available)}",
    )


class FileReaderError(Exception):
    """Base class for errors that leave the dispatcher or the catalog"""

    def __init__(self, kind: ErrorKind, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path

    @classmethod
    def from_failure(cls, failure: Failure) -> "FileReaderError":
        return cls(failure.kind, failure.message, path=failure.path)

    @property
    def code(self) -> int:
        return ERROR_CODES.get(self.kind, -32603)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": self.message}


class ToolCallError(FileReaderError):
    """Uniform error raised by ``FileSystemServer.call_tool``"""


class ResourceError(FileReaderError):
    """Raised by the resource catalog when a listing or read cannot proceed"""
