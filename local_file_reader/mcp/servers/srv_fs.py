"""FileSystem Server - read, list and stat files as MCP tools"""
import json
import os
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import ValidationError

from local_file_reader.config import Config
from local_file_reader.fs.mime import classify
from local_file_reader.fs.paths import PathResolver
from local_file_reader.fs.reader import read_content, render
from local_file_reader.mcp import errors
from local_file_reader.mcp.errors import Failure, ToolCallError
from local_file_reader.mcp.servers.resources import ResourceCatalog
from local_file_reader.mcp.models import (
    ContentEnvelope,
    FileInfo,
    ServerDefinition,
    ToolCallRequest,
    ToolDescriptor,
)
from local_file_reader.observability.logger import log_tool_call, logger

SERVER_NAME = "mcp-local-file-reader"
SERVER_VERSION = "0.1.0"


def _file_path_schema(description: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "filePath": {
                "type": "string",
                "description": description
            }
        },
        "required": ["filePath"]
    }


def build_server_definition() -> ServerDefinition:
    """Declare the server and its fixed tool set"""
    return ServerDefinition(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        tools=(
            ToolDescriptor(
                name="read_file",
                description="Read the contents of a file. Binary formats are described, not decoded.",
                input_schema=_file_path_schema("Path of the file to read"),
            ),
            ToolDescriptor(
                name="list_files",
                description="List the entries of a directory, one name per line",
                input_schema=_file_path_schema("Path of the directory to list"),
            ),
            ToolDescriptor(
                name="get_file_info",
                description="Get size, type and timestamps of a file or directory",
                input_schema=_file_path_schema("Path of the file to inspect"),
            ),
        ),
    )


def _timestamp(seconds: float) -> str:
    return datetime.fromtimestamp(seconds).isoformat()


class FileSystemServer:
    """Dispatch tool calls to filesystem operations"""

    def __init__(self, definition: ServerDefinition, resolver: PathResolver):
        self.definition = definition
        self.resolver = resolver
        self._handlers = {
            "read_file": self.read_file,
            "list_files": self.list_files,
            "get_file_info": self.get_file_info,
        }

    def list_tools(self) -> List[ToolDescriptor]:
        # Copies, so callers cannot edit the shared schemas
        return [tool.model_copy(deep=True) for tool in self.definition.tools]

    def call_tool(self, request: Union[ToolCallRequest, Dict[str, Any]]) -> ContentEnvelope:
        """
        Run a tool call

        Args:
            request: tool name and arguments

        Returns:
            Content envelope with a single text item

        Raises:
            ToolCallError: for every failure, carrying the original message and its kind
        """
        if isinstance(request, dict):
            try:
                request = ToolCallRequest(name=request.get("name") or "",
                                          arguments=request.get("arguments") or {})
            except ValidationError as e:
                failure = errors.malformed_request(
                    "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
                )
                logger.warning("tool_call_rejected", error=failure.message)
                raise ToolCallError.from_failure(failure) from e

        name = request.name.replace('-', '_')  # read-file -> read_file
        start_ms = int(time.time() * 1000)

        handler = self._handlers.get(name)
        if handler is None or self.definition.get_tool(name) is None:
            outcome = errors.unknown_tool(request.name, self.definition.tool_names)
        else:
            try:
                outcome = handler(request.arguments or {})
            except (OSError, ValueError) as e:
                logger.error("tool_call_failed", tool=name, error=str(e))
                raise ToolCallError(errors.ErrorKind.READ_FAILURE, str(e)) from e

        end_ms = int(time.time() * 1000)
        if isinstance(outcome, Failure):
            log_tool_call(name, "failed", start_ms, end_ms,
                          error=outcome.message, error_kind=outcome.kind.value)
            raise ToolCallError.from_failure(outcome)

        log_tool_call(name, "success", start_ms, end_ms)
        return outcome

    def _require_path(self, arguments: Dict[str, Any]) -> Union[Path, Failure]:
        file_path = arguments.get("filePath")
        if not isinstance(file_path, str) or not file_path.strip():
            return errors.invalid_argument("filePath")
        return self.resolver.resolve(file_path)

    def read_file(self, arguments: Dict[str, Any]) -> Union[ContentEnvelope, Failure]:
        """Return the file's text, or a binary descriptor"""
        path = self._require_path(arguments)
        if isinstance(path, Failure):
            return path
        if not path.exists():
            return errors.file_not_found(arguments["filePath"])

        result = read_content(path)
        return ContentEnvelope.text(render(result))

    def list_files(self, arguments: Dict[str, Any]) -> Union[ContentEnvelope, Failure]:
        """Return directory entries newline-joined, in filesystem order"""
        path = self._require_path(arguments)
        if isinstance(path, Failure):
            return path
        if not path.exists():
            return errors.directory_not_found(arguments["filePath"])

        try:
            entries = os.listdir(path)
        except OSError as e:
            return errors.directory_unreadable(path, e)

        return ContentEnvelope.text("\n".join(entries))

    def get_file_info(self, arguments: Dict[str, Any]) -> Union[ContentEnvelope, Failure]:
        """Return a metadata snapshot as pretty-printed JSON"""
        path = self._require_path(arguments)
        if isinstance(path, Failure):
            return path
        if not path.exists():
            return errors.file_not_found(arguments["filePath"])

        stat = path.stat()
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        info = FileInfo(
            path=str(path),
            size=stat.st_size,
            is_directory=path.is_dir(),
            is_file=path.is_file(),
            created_at=_timestamp(created),
            modified_at=_timestamp(stat.st_mtime),
            extension=path.suffix,
            mime_type=classify(path),
        )
        return ContentEnvelope.text(json.dumps(info.to_wire(), indent=2, ensure_ascii=False))

    def manifest(self) -> dict:
        return {
            "server": self.definition.name,
            "version": self.definition.version,
            "tools": [tool.to_wire() for tool in self.definition.tools]
        }


def build_servers(config: Config) -> Tuple[FileSystemServer, ResourceCatalog]:
    """Wire the dispatcher and the resource catalog around one shared definition"""
    definition = build_server_definition()
    resolver = PathResolver(config.data_path, config.MODE)
    return FileSystemServer(definition, resolver), ResourceCatalog(definition, resolver)
